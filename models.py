#This file will contain the Reminder class, which represents individual reminders.

#models.py:
# Contains the Reminder class.
# Represents the data model for reminders.


class Reminder:
    def __init__(self, description, tag):
        self.description = description
        self.tag = tag  # Stored as entered, display code may upper-case it
        self._is_completed = False

    @property
    def is_completed(self):
        return self._is_completed

    def toggle_completion(self):
        self._is_completed = not self._is_completed

    def __repr__(self):
        return f"<Reminder(description='{self.description}', tag='{self.tag}', completed={self._is_completed})>"
