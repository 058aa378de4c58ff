from .calendar import days_until, get_events, get_person_today_events

__all__ = ["days_until", "get_events", "get_person_today_events"]
