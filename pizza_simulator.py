"""
Pizza Simulator - LEGACY WRAPPER
================================

This file is maintained for backwards compatibility with the old
single-script entry point. The code lives in the 'pizza_manager' package.

USAGE:
------

Option 1 - Run as module:
    python -m pizza_manager

Option 2 - Run this file (legacy):
    python pizza_simulator.py

Option 3 - Import in code:
    from pizza_manager import PizzaManager

    manager = PizzaManager()
    manager.add_random_pizza()

For more information, see pizza_manager/__init__.py
"""

from pizza_manager.cli import main

if __name__ == "__main__":
    main()
