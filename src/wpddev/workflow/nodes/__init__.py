"""Workflow nodes for the setup state machine."""

from wpddev.workflow.nodes.database import ImportDatabase
from wpddev.workflow.nodes.ddev import CheckDdev
from wpddev.workflow.nodes.docker import CheckDocker
from wpddev.workflow.nodes.environment import DetectEnvironment
from wpddev.workflow.nodes.finish import Finish
from wpddev.workflow.nodes.launch import Launch
from wpddev.workflow.nodes.setup import RunSetupStep
from wpddev.workflow.nodes.validate import ValidateProject

__all__ = [
    "DetectEnvironment",
    "CheckDocker",
    "CheckDdev",
    "ValidateProject",
    "RunSetupStep",
    "ImportDatabase",
    "Launch",
    "Finish",
]
