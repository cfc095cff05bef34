from launchpad.services.deployment import DeploymentSimulator
from launchpad.services.statistics import compute_dashboard_stats
from launchpad.services.store import LaunchpadStore

__all__ = [
    "DeploymentSimulator",
    "LaunchpadStore",
    "compute_dashboard_stats",
]
