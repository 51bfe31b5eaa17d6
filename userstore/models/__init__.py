"""
The models package contains all the models used by the store.

.. autoclasstree:: userstore.models
"""

from .user import User
