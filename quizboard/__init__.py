"""Quiz results and leaderboard backend."""
