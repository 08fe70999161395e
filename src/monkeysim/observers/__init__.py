"""
Observers: diagnostics attached to a running engine.

Observers see the engine after every round. They never change it.
- ActivityRecorder: inspection counters per round
- InventoryProbe: items held per agent per round
"""

from monkeysim.observers.base import Observer, ObserverConfig
from monkeysim.observers.activity import ActivityRecorder, create_activity_recorder
from monkeysim.observers.inventory import InventoryProbe, create_inventory_probe

__all__ = [
    "Observer",
    "ObserverConfig",
    "ActivityRecorder",
    "create_activity_recorder",
    "InventoryProbe",
    "create_inventory_probe",
]
