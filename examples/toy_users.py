"""
Paging through an in-memory user list.

Walks the collection with `next` links, then jumps back with `prev`.
"""

import random

from pagewindow import Paginator, PaginatorOptions, entries_from, payload_overlaps

users = [
    {"name": f"a{n}", "domain": "local", "roles": ["admin"] if n % 4 == 0 else []}
    for n in range(10, 31)
]
random.shuffle(users)  # upstream order does not matter

paginator = Paginator(PaginatorOptions(default_page_size=3))

# Walk forward from the first page
start = None
while True:
    page = paginator.page(entries_from(users, key="name"), start=start)
    print(f"{page.keys}  skipped={page.skipped} total={page.total} links={page.links.as_dict()}")
    if not page.has_more:
        break
    start = page.links.next

# Start from a name that does not exist: lands on the next one
page = paginator.page(entries_from(users, key="name"), start="a14b")
print(f"\nFrom 'a14b': {page.keys} ({page.skipped} hidden before), prev={page.links.prev}")

# Only admins; the total shrinks with the filter
admins = paginator.page(
    entries_from(users, key="name"), filters=[payload_overlaps("roles", ["admin"])]
)
print(f"\nAdmins: {admins.keys} of {admins.total}")
