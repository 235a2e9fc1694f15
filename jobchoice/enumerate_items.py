"""Logic for listing the items below a resolved folder."""

from jobchoice.item_record import ItemRecord
from jobchoice.registry import Item, ItemGroup, Job


def enumerate_items(group: ItemGroup) -> list[ItemRecord]:
    """Return a record for every item the registry lists under the group."""
    records = []
    for obj in group.get_all_items():
        if not isinstance(obj, Item):
            continue
        last_activity = None
        if isinstance(obj, Job):
            build = obj.get_last_build()
            if build is not None:
                last_activity = build.timestamp
        records.append(ItemRecord(obj.name, obj.full_name, last_activity))
    return records
