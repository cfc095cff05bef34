"""FastAPI dependencies for the store and services owned by the app."""

from typing import Annotated

from fastapi import Depends, Request

from launchpad.core.config import Settings
from launchpad.services import DeploymentSimulator, LaunchpadStore


def get_store(request: Request) -> LaunchpadStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_deployer(request: Request) -> DeploymentSimulator:
    return request.app.state.deployer


StoreDep = Annotated[LaunchpadStore, Depends(get_store)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
DeployerDep = Annotated[DeploymentSimulator, Depends(get_deployer)]
