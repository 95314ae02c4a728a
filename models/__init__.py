# models/__init__.py

from .contact import Contact, ContactPayload, ContactRead
from .envelope import Envelope
