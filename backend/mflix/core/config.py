from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field, MongoDsn
class Settings(BaseSettings):
    # MONGODB_URI is what existing mflix deployments already export
    mongo_uri: MongoDsn = Field("mongodb://localhost:27017/sample_mflix",
                                validation_alias=AliasChoices("MONGODB_URI", "MONGO_URI", "mongo_uri"))
    jwt_secret: str = Field(..., min_length=32)
    jwt_expires: int = 86400
    bcrypt_rounds: int = Field(12, ge=4, le=31)
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    movies_collection: str = "movies"
    users_collection: str = "users"
    class Config: env_file = ".env"
@lru_cache
def get_settings() -> Settings: return Settings()
