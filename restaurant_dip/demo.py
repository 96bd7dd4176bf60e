"""
Restaurant DIP Demo

Runs the restaurant scenarios side by side: the tightly-coupled service,
then Dependency Injection, Factory and Strategy, and finally the same
service wired to test doubles.

Each scenario returns a ScenarioResult; printing is done separately by
render_report() so the scenarios can be reused and asserted on.

Usage:
    restaurant-dip-demo
    restaurant-dip-demo --scenario strategy
    restaurant-dip-demo --database mongodb --notification slack --debug

Author: Your Name
Version: 1.0.0
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from pydantic import ValidationError

from restaurant_dip.core.config import Settings, get_settings, setup_logging
from restaurant_dip.core.exceptions import InvalidConfigurationError
from restaurant_dip.legacy import TightlyCoupledRestaurantService
from restaurant_dip.models import Order
from restaurant_dip.services.database import (
    MockDatabaseService,
    MySQLDatabase,
    PostgreSQLDatabase,
)
from restaurant_dip.services.notifications import (
    EmailNotification,
    MockNotificationService,
    SMSNotification,
)
from restaurant_dip.services.payment import PaymentProcessor, create_payment_strategy
from restaurant_dip.services.restaurant import RestaurantManager, RestaurantService

logger = logging.getLogger(__name__)


@dataclass
class ScenarioStep:
    """One action taken in a scenario and what came of it."""
    action: str
    outcome: str


@dataclass
class ScenarioResult:
    """All steps of one scenario, in order."""
    key: str
    title: str
    steps: list[ScenarioStep] = field(default_factory=list)

    def add(self, action: str, outcome: object) -> None:
        self.steps.append(ScenarioStep(action=action, outcome=str(outcome)))


# =============================================================================
# SCENARIOS
# =============================================================================

def run_tight_coupling(settings: Settings) -> ScenarioResult:
    """The service that builds its own MySQL database and email sender."""
    result = ScenarioResult("problem", "PROBLEM: DIP Violation")

    service = TightlyCoupledRestaurantService()
    order = Order(1, "Nasi Gudeg Special", 35.00)
    result.add(f"process {order}", service.process_order(order))
    return result


def run_dependency_injection(settings: Settings) -> ScenarioResult:
    """Same service, two wirings, chosen by the caller."""
    result = ScenarioResult("injection", "SOLUTION 1: Dependency Injection")

    wirings = [
        (MySQLDatabase(), EmailNotification(), Order(2, "Sate Ayam Madura", 28.50)),
        (PostgreSQLDatabase(), SMSNotification(), Order(3, "Rendang Padang", 42.00)),
    ]
    for database, notification, order in wirings:
        service = RestaurantService(database, notification)
        receipt = service.process_order(order)
        result.add(
            f"process order {order.id} via {service.get_configuration()}",
            receipt.message,
        )
    return result


def run_factory(settings: Settings) -> ScenarioResult:
    """Services selected by configuration keys instead of class names."""
    result = ScenarioResult("factory", "SOLUTION 2: Factory Pattern")
    manager = RestaurantManager()

    result.add(
        "process order 0 before initialize",
        manager.process_order(Order(0, "Es Teh Manis", 1.50)) or manager.get_configuration(),
    )

    for database_type, notification_type, order in [
        ("mongodb", "slack", Order(4, "Gado-gado Jakarta", 22.00)),
        ("postgresql", "email", Order(5, "Bakso Malang", 18.50)),
    ]:
        manager.initialize(database_type, notification_type)
        receipt = manager.process_order(order)
        result.add(
            f"initialize('{database_type}', '{notification_type}') and process order {order.id}",
            f"{manager.get_configuration()}: {receipt.message}",
        )

    try:
        manager.initialize("oracle", "email")
    except InvalidConfigurationError as e:
        result.add("initialize('oracle', 'email')", f"rejected: {e}")

    manager.initialize_from_settings(settings)
    receipt = manager.process_order(Order(7, "Soto Betawi", 24.00))
    result.add(
        f"initialize from settings ({settings.database_type}, {settings.notification_type})",
        f"{manager.get_configuration()}: {receipt.message}",
    )
    return result


def run_strategy(settings: Settings) -> ScenarioResult:
    """One processor, payment strategy swapped per payment method."""
    result = ScenarioResult("strategy", "SOLUTION 3: Strategy Pattern")

    order = Order(6, "Ayam Bakar Taliwang", 45.00)
    processor = PaymentProcessor(create_payment_strategy(settings.payment_method))

    for payment_type, payment_info in [
        ("credit_card", "1234567890123456"),
        ("credit_card", "123"),
        ("wallet", "wallet123"),
        ("cash", ""),
    ]:
        order.set_payment_info(payment_type, payment_info)
        processor.set_strategy(create_payment_strategy(payment_type))
        paid = processor.process_order_payment(order)
        result.add(
            f"pay order {order.id} by {processor.get_current_strategy()} ('{payment_info}')",
            "Payment successful" if paid else "Payment validation failed",
        )
    return result


def run_testing(settings: Settings) -> ScenarioResult:
    """The injected service wired to test doubles."""
    result = ScenarioResult("testing", "TESTING: Easy Mocking with DIP")

    database = MockDatabaseService()
    notification = MockNotificationService()
    service = RestaurantService(database, notification)

    service.process_order(Order(999, "Test Order", 99.99))
    result.add("mock database saved", f"order {database.last_saved_order.id}")
    result.add("mock notification sent", notification.last_message)
    return result


SCENARIOS: dict[str, Callable[[Settings], ScenarioResult]] = {
    "problem": run_tight_coupling,
    "injection": run_dependency_injection,
    "factory": run_factory,
    "strategy": run_strategy,
    "testing": run_testing,
}


def run_scenarios(
    keys: Optional[list[str]] = None,
    settings: Optional[Settings] = None,
) -> list[ScenarioResult]:
    """Run the named scenarios (all of them by default) in order."""
    settings = settings or get_settings()
    return [SCENARIOS[key](settings) for key in (keys or list(SCENARIOS))]


# =============================================================================
# PRESENTATION
# =============================================================================

def render_report(
    results: list[ScenarioResult],
    stream: Optional[TextIO] = None,
    title: str = "RESTAURANT MANAGEMENT SYSTEM - DIP DEMO",
) -> None:
    """Print scenario results as a readable transcript."""
    stream = stream or sys.stdout

    print("=" * 60, file=stream)
    print(f"  {title}", file=stream)
    print("=" * 60, file=stream)

    for result in results:
        print(f"\n{'-' * 40}", file=stream)
        print(f"  {result.title}", file=stream)
        print("-" * 40, file=stream)
        for step in result.steps:
            print(f"  • {step.action}", file=stream)
            print(f"      → {step.outcome}", file=stream)

    print("\n" + "=" * 60, file=stream)
    print("  Depend on abstractions, not concretions.", file=stream)
    print("=" * 60, file=stream)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Command-line entry point.

    Returns:
        int: 0 on success, 2 if the configuration names an unknown variant
    """
    parser = argparse.ArgumentParser(description="Restaurant DIP demonstration")
    parser.add_argument(
        "--scenario",
        choices=list(SCENARIOS),
        action="append",
        help="Run only this scenario (repeatable)",
    )
    parser.add_argument("--database", help="Override DATABASE_TYPE for this run")
    parser.add_argument("--notification", help="Override NOTIFICATION_TYPE for this run")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    # Overrides bypass Settings validation; the factories reject bad keys.
    if args.database or args.notification:
        settings = settings.model_copy(update={
            "database_type": args.database or settings.database_type,
            "notification_type": args.notification or settings.notification_type,
        })

    try:
        results = run_scenarios(args.scenario, settings)
    except InvalidConfigurationError as e:
        logger.error(f"Configuration error: {e} (valid: {', '.join(e.valid)})")
        return 2

    render_report(results, title=settings.app_name.upper() + " - DIP DEMO")
    return 0


if __name__ == "__main__":
    sys.exit(main())
