"""ShoreSquad beach cleanup backend."""
