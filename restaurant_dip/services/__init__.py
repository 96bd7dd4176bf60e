"""
                        Services Module

Every service is defined as an abstract base class with interchangeable
implementations. High-level code (RestaurantService, RestaurantManager,
PaymentProcessor) only ever sees the abstractions.

Services:
    - database: order persistence (MySQL, PostgreSQL, MongoDB, mock)
    - notifications: message delivery (Email, SMS, Slack, mock)
    - payment: payment strategies and the processor that runs them
    - restaurant: order orchestration and factory-driven configuration
"""

from restaurant_dip.services.restaurant import RestaurantManager, RestaurantService

__all__ = ["RestaurantManager", "RestaurantService"]
