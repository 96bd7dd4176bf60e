"""
                Restaurant DIP Demonstration

A restaurant order system showing the Dependency Inversion Principle:
a tightly-coupled "before" service next to an abstraction-based design
built with Dependency Injection, Factory and Strategy patterns.

Author: Your Name
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
