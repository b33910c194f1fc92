#This file will contain the ReminderStore class and the errors it raises.

#managers.py:
# Contains the ReminderStore class.
# Keeps every reminder of the session in memory, in the order it was added.

import logging

from models import Reminder


class ReminderNotFoundError(IndexError):
    def __init__(self, index):
        super().__init__(f"Item not found at index {index}")
        self.index = index


class ReminderStore:
    def __init__(self):
        self._reminders = []

    @property
    def reminders(self):
        """Live list of reminders, in insertion order."""
        return self._reminders

    def add_reminder(self, description, tag):
        self._reminders.append(Reminder(description, tag))
        logging.info("Added reminder: '%s' tagged '%s'", description, tag)

    def size(self):
        return len(self._reminders)

    def __len__(self):
        return self.size()

    def is_index_valid(self, index):
        if self.size() == 0:
            return False
        return 0 <= index < self.size()

    def get_reminder(self, index):
        # Negative indices must not wrap around to the end of the list
        if not self.is_index_valid(index):
            raise ReminderNotFoundError(index)
        return self._reminders[index]

    def modify_reminder(self, index, description):
        """Replace the description of the reminder at index.

        Calls with an invalid index are ignored.
        """
        if not self.is_index_valid(index):
            logging.warning("Ignored modify for invalid index %s", index)
            return
        self._reminders[index].description = description
        logging.info("Modified reminder %d: '%s'", index, description)

    def toggle_completion(self, index):
        """Flip the completion status of the reminder at index.

        Calls with an invalid index are ignored, same as modify_reminder.
        """
        if not self.is_index_valid(index):
            logging.warning("Ignored toggle for invalid index %s", index)
            return
        reminder = self._reminders[index]
        reminder.toggle_completion()
        logging.info("Toggled reminder %d, completed=%s", index, reminder.is_completed)

    def search(self, keyword):
        """Return reminders whose tag equals keyword exactly.

        When no tag matches, fall back to reminders whose description
        contains keyword. Both comparisons are case-sensitive and keep
        insertion order.
        """
        matches = self._search_tags(keyword)
        if matches:
            return matches
        return self._search_descriptions(keyword)

    def group_by_tag(self):
        """Return a dict of tag -> reminders.

        Tags are compared exactly ("work" and "Work" are separate groups).
        Keys follow the order each tag was first seen.
        """
        groupings = {}
        for reminder in self._reminders:
            groupings.setdefault(reminder.tag, []).append(reminder)
        return groupings

    def _search_tags(self, keyword):
        return [reminder for reminder in self._reminders if reminder.tag == keyword]

    def _search_descriptions(self, keyword):
        return [reminder for reminder in self._reminders if keyword in reminder.description]
