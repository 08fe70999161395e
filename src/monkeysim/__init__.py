"""
monkeysim: Keep-Away Item Dispersal Simulator

A simulator of agents ("monkeys") passing numeric items to one another.

Core concepts:
- Each agent holds a FIFO queue of worry levels
- On its turn an agent inspects every item it holds
- Inspection transforms the worry level, then a worry policy bounds it
- A divisibility test decides which agent receives the item next
- Inspection counts, ranked, give the "monkey business" metric

See DESIGN.md for full details.
"""

__version__ = "0.1.0"
