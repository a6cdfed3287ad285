"""
Service layer for opskit.

One handler class per command plus the shared process, logging,
confirmation and precondition services they are built from.
"""
