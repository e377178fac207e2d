from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BOOKSHELF_")

    host: str = "127.0.0.1"
    port: int = 3000
    path: str = "/graphql"
    graphiql: bool = True
    seed: bool = True

    @field_validator("path")
    @classmethod
    def path_is_absolute(cls, value):
        if not value.startswith("/"):
            raise ValueError("path must start with /, but was {!r}".format(value))
        return value
