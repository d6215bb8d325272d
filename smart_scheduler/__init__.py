"""
Smart Scheduler

Meeting scheduling service: finds the best common free slot across
participant calendars and books it for everyone.
"""
