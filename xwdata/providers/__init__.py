"""
Upstream data providers
"""
from .ffg_squadbuilder_provider import FfgSquadBuilderProvider
