# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from quora.models.question import Question  # noqa: F401
from quora.models.user import User  # noqa: F401
from quora.models.user_auth import UserAuth  # noqa: F401
