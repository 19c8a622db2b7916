"""
Core Protocol Interfaces

Available Protocols:
    - TodoStoreProtocol: Whole-table todo persistence
"""

from csvtodo.core.interfaces.store import TodoStoreProtocol

__all__ = ["TodoStoreProtocol"]
