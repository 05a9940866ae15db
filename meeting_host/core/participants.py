from typing import Callable, List


class ParticipantSet:
    """
    Ordered guest list of the draft. Entries are not de-duplicated.
    Every change reports the new head count, which doubles as the room
    capacity the availability lookup asks for.
    """

    def __init__(self, members: List[str], on_count_changed: Callable[[int], None]):
        self.members = members
        self.on_count_changed = on_count_changed

    def __len__(self) -> int:
        return len(self.members)

    def add(self, raw: str) -> bool:
        email = raw.strip()
        if not email:
            return False
        self.members.append(email)
        self.on_count_changed(len(self.members))
        return True

    def remove(self, value: str) -> None:
        # in place: the draft holds the same list object
        self.members[:] = [m for m in self.members if m != value]
        self.on_count_changed(len(self.members))
