"""Analytics and scheduling engines — summary, leaderboard, schedules, booking."""
