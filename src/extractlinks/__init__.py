"""
Concurrent link extraction: fetch a list of URLs and collect the https links
found in their bodies.
"""
from extractlinks.master.master_node import MasterNode, RunState

__version__ = "1.0.0"

__all__ = ['MasterNode', 'RunState']
