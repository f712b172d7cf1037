"""Chemion glasses connector package"""

from connector.base import GlassesDesigner
from connector.client import GlassesClient
from connector.commands import CommandGate
from utils.constants import ConnectionState, Intensity, StateColors, StateDisplay

__all__ = [
    'GlassesDesigner',
    'GlassesClient',
    'CommandGate',
    'ConnectionState',
    'Intensity',
    'StateColors',
    'StateDisplay'
]
