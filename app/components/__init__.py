# ============= app/components/__init__.py =============
'''UI components package for Streamlit interface.'''

from .login_form import LoginForm
from .employee_dashboard import EmployeeDashboardView
from .manager_dashboard import ManagerDashboardView

__all__ = ['LoginForm', 'EmployeeDashboardView', 'ManagerDashboardView']
