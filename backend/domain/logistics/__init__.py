"""
Logistics Domain - Deliveries and pickups.

Date bucketing of logistics events into upcoming calendar or working days.
"""
