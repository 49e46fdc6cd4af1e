from adapters.telegram.handlers import start, auth, stadiums, add_stadium, profile

# IMPORTANT: State-specific routers must be BEFORE start router
# because start.py has the catch-all fallback handler
routers = [
    auth.router,         # Login/register FSM states
    add_stadium.router,  # Add stadium FSM states
    stadiums.router,
    profile.router,
    start.router,        # Last: has catch-all handlers
]

__all__ = ["routers"]
