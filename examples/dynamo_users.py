"""
Paging a DynamoDB users table keyed by (name, domain).

The scan is streamed through the window, so only page_size + 1 entries per
selector are held in memory however large the table is.
"""

import boto3

from pagewindow import DynamoEntrySource, PageEnvelope, paginate, payload_overlaps

client = boto3.client("dynamodb", region_name="us-east-1")
users = DynamoEntrySource(client, "Users", key_attributes=("name", "domain"))

# First page of administrators
page = paginate(users, page_size=20, filters=[payload_overlaps("roles", ["admin"])])
print(PageEnvelope.from_result(page).to_json_dict())

# Following page: the source rescans, the cursor is a (name, domain) tuple
if page.has_more:
    following = paginate(
        users,
        page_size=20,
        start=page.links.next,
        filters=[payload_overlaps("roles", ["admin"])],
    )
    print([entry.key for entry in following.items])
