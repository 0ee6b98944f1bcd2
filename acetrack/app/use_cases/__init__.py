"""
Use Cases

Organized into domain folders:
- events/: Event scheduling and lifecycle
- organizations/: Organization management
- members/: Membership and join requests
- subscriptions/: Paid subscription terms
- attendance/: Check-in and check-out
- users/: Caller resolution
- audit/: Audit logs
- admin/: Maintenance sweeps

Import from subdirectories.
"""
