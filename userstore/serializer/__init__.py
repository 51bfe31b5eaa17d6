"""
.. autoclasstree:: userstore.serializer

The serializer package houses the schemas that turn users into
raw data (such as JSON) and back. The key-value backend persists
its users through them.
"""

from .models import UserSchema
