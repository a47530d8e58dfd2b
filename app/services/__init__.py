"""Business logic services.

This module contains:
- the mediator and its pipeline behaviors
- the validation behavior
- the Ping handler and validator
"""
