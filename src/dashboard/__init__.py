# ============= src/dashboard/__init__.py =============
'''Dashboard controllers holding view state for each role.'''

from .base import ActionError, DashboardController, fetch_concurrently
from .login import LoginController
from .employee import EmployeeDashboard
from .manager import ManagerDashboard

__all__ = [
    'ActionError',
    'DashboardController',
    'fetch_concurrently',
    'LoginController',
    'EmployeeDashboard',
    'ManagerDashboard'
]
