# apps/dashboard/navigation.py

from collections import namedtuple

from apps.login_page.session import ROLE_ADMIN, ROLE_HOST

NavLink = namedtuple('NavLink', ['route', 'label', 'icon', 'allowed_roles'])

NAV_LINKS = (
    NavLink('/', 'Dashboard', 'fa-house', (ROLE_ADMIN, ROLE_HOST)),
    NavLink('/hosts/', 'Hosts', 'fa-users', (ROLE_ADMIN,)),
    NavLink('/categories/', 'Categories', 'fa-layer-group', (ROLE_ADMIN,)),
    NavLink('/amenities/', 'Amenities', 'fa-wifi', (ROLE_ADMIN,)),
    NavLink('/events/', 'Events', 'fa-calendar-days', (ROLE_ADMIN, ROLE_HOST)),
    NavLink('/bookings/', 'Bookings', 'fa-ticket', (ROLE_HOST,)),
    NavLink('/events/transactions/', 'Transactions', 'fa-wallet', (ROLE_HOST,)),
)


def filter_nav_links(links, role):
    """Entries visible to ``role``, in their original order."""
    if not role:
        return []
    return [link for link in links if role in link.allowed_roles]
