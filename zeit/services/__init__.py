"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .slot_planner import ScheduleSourceProtocol, SlotPlanner

__all__ = ["ScheduleSourceProtocol", "SlotPlanner"]
