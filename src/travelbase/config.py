from dataclasses import dataclass
import os
from typing import Mapping, Optional

from dotenv import dotenv_values, find_dotenv

from travelbase.errors import ConfigurationError

ENDPOINT_ENV = "TRAVELBASE_GRAPHQL_ENDPOINT"
API_KEY_ENV = "TRAVELBASE_GRAPHQL_APIKEY"


@dataclass(frozen=True)
class Settings:
    endpoint: str
    api_key: str


def _lookup(name: str, explicit: Optional[str], dotenv: Mapping[str, Optional[str]]) -> str:
    # explicit argument, then the process environment, then the .env file
    for value in (explicit, os.getenv(name), dotenv.get(name)):
        if value and value.strip():
            return value.strip()
    return ""


def resolve_settings(endpoint: Optional[str] = None, api_key: Optional[str] = None) -> Settings:
    """
    Explicit arguments win; otherwise fall back to the environment and a .env file
    found from the working directory. The .env file is read, never exported.
    """
    dotenv = dotenv_values(find_dotenv(usecwd=True))

    endpoint = _lookup(ENDPOINT_ENV, endpoint, dotenv)
    if not endpoint:
        raise ConfigurationError(f"Endpoint not defined. Pass it explicitly or set {ENDPOINT_ENV}.")

    api_key = _lookup(API_KEY_ENV, api_key, dotenv)
    if not api_key:
        raise ConfigurationError(f"Api key not defined. Pass it explicitly or set {API_KEY_ENV}.")

    return Settings(endpoint=endpoint, api_key=api_key)
