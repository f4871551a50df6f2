import os
from dataclasses import dataclass

from constants import (
    DEFAULT_LOCATION,
    DEFAULT_MODEL_NAME,
    ENV_LOCATION,
    ENV_MODEL_NAME,
    ENV_PROJECT_ID,
)


@dataclass(frozen=True)
class Config:
    project_id: str
    location: str
    model_name: str

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        environ = os.environ if environ is None else environ
        return cls(
            project_id=environ.get(ENV_PROJECT_ID, ""),
            location=environ.get(ENV_LOCATION) or DEFAULT_LOCATION,
            model_name=environ.get(ENV_MODEL_NAME) or DEFAULT_MODEL_NAME,
        )

    def missing_variables(self) -> list:
        missing_vars = []
        if not self.project_id:
            missing_vars.append(ENV_PROJECT_ID)
        if not self.location:
            missing_vars.append(ENV_LOCATION)
        if not self.model_name:
            missing_vars.append(ENV_MODEL_NAME)
        return missing_vars

    @property
    def is_valid(self) -> bool:
        return not self.missing_variables()
