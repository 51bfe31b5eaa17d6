"""
.. autoclasstree:: userstore.service

The service layer for the system. Acts as the internal API.
Each interface (the REST API, scripts) should use the
service layer rather than talking to a repository directly.
"""

from .view_model import UsersViewModel
