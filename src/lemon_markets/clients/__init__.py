"""lemon.markets API clients.

Import the concrete clients from ``lemon_markets`` or their subpackages;
this package stays empty so ``lemon_markets.config`` can depend on ``clients.core``.
"""
