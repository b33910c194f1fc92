#This file will contain the user interface functions and the main() function. It will import the classes from models.py and managers.py.

#main.py
# Contains the rendering helpers and the user interface functions (add_reminder_ui, show_reminders_ui, etc.).
# Contains the main() function, which creates the store and starts the program loop.
# Manages user interaction and ties everything together.

import logging
import os
import re

from rich.console import Console
from rich.table import Table

from managers import ReminderStore

LOG_FILE = os.environ.get("REMINDERS_LOG_FILE", "reminders.log")
LOG_LEVEL = os.environ.get("REMINDERS_LOG_LEVEL", "INFO")

MENU_ITEMS = [
    ("1", "Show all reminders 👀"),
    ("2", "Search reminders 🔎"),
    ("3", "Add reminder ➕"),
    ("4", "Modify reminders 📝"),
    ("5", "Toggle completion ✅"),
    ("6", "Exit 👋"),
]
EXIT_CHOICE = "6"

NO_REMINDERS = "\n  ⚠️  You have no reminders"


def configure_logging(log_file=LOG_FILE, level=LOG_LEVEL):
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )


# Rendering helpers, no I/O

def render_menu(items):
    table = Table(title="Reminders Menu", show_header=False)
    table.add_column("Number", justify="center")
    table.add_column("Action")
    for number, label in items:
        table.add_row(number, label)
    return table


def format_description(reminder):
    marker = "🟢" if reminder.is_completed else "⭕️"
    return f"  {marker} {reminder.description}"


def format_grouped_reminders(groups):
    lines = []
    for tag, reminders in groups.items():
        lines.append(f"\n🏷️  {tag.upper()}\n")
        lines.extend(format_description(reminder) for reminder in reminders)
    return "\n".join(lines)


def format_reminder_list(reminders):
    return "\n".join(f" [{idx}] {reminder.description}" for idx, reminder in enumerate(reminders, start=1))


def format_search_results(reminders):
    if not reminders:
        return "No results found for search.\n"
    return "\n".join(format_description(reminder) for reminder in reminders)


# Input helpers

def validate_input(user_input, store, index_required=False):
    if not user_input.strip():
        print("\n  🚨  Input cannot be blank: Please try again.\n")
        return False
    if index_required:
        if not re.fullmatch(r"\d+", user_input):
            print("\n  🚨  Input must be positive number from the list of reminders: Please try again.\n")
            return False
        if not store.is_index_valid(int(user_input) - 1):
            print("\n  🚨  Input must be number from the list of reminders: Please try again.\n")
            return False
    return True


def ask_yes_no(prompt):
    while True:
        answer = input(prompt).strip().lower()
        if answer in ('y', 'n'):
            return answer
        print("\n  🚨  Invalid input: Please enter either y/n.\n")


def get_user_choice(question, store, index_required=False):
    while True:
        user_choice = input(f"\nEnter a {question} here: ")
        if not validate_input(user_choice, store, index_required):
            continue
        if ask_yes_no(f"You entered {question}: '{user_choice}', is it correct? y/n: ") == 'y':
            return user_choice
        print("\n  🔄  Please try typing it again")


def get_menu_item():
    valid_choices = [number for number, _ in MENU_ITEMS]
    while True:
        choice = input("Choose a [Number] followed by [Enter]: ").strip()
        if choice in valid_choices:
            return choice
        logging.warning("Invalid menu choice: '%s'", choice)
        print("\n  🚨  Sorry, input is not a valid menu item.\n")


def get_index(store):
    # Users count from 1, the store counts from 0
    return int(get_user_choice("reminder number", store, index_required=True)) - 1


# Menu handlers

def show_reminders_ui(store):
    if store.size() == 0:
        print(NO_REMINDERS)
        return
    print(format_grouped_reminders(store.group_by_tag()))


def search_reminders_ui(store):
    if store.size() == 0:
        print(NO_REMINDERS)
        return
    keyword = get_user_choice("search keyword", store)
    print()
    print(format_search_results(store.search(keyword)))


def add_reminder_ui(store):
    description = get_user_choice("reminder (description)", store)
    tag = get_user_choice("tag", store)
    store.add_reminder(description, tag)
    print("\n  🏁  Reminder Added")


def modify_reminder_ui(store):
    if store.size() == 0:
        print(NO_REMINDERS)
        return
    print("\n" + format_reminder_list(store.reminders))
    index = get_index(store)
    description = get_user_choice("new description", store)
    store.modify_reminder(index, description)
    if ask_yes_no("\nDo you wish to toggle the completed status? y/n: ") == 'y':
        store.toggle_completion(index)
        print("\n  🏁   Reminder Completion Toggled")
    print("\n  🏁   Reminder Modified")


def toggle_completion_ui(store):
    if store.size() == 0:
        print(NO_REMINDERS)
        return
    print("\n" + format_reminder_list(store.reminders))
    store.toggle_completion(get_index(store))
    print("\n  🏁   Reminder Completion Toggled")


def handle_menu_selection(console):
    input("\nHit [Enter] key to see main menu: ")
    console.print(render_menu(MENU_ITEMS))
    return get_menu_item()


def main(store=None):
    configure_logging()
    store = store if store is not None else ReminderStore()
    console = Console()

    try:
        while True:
            choice = handle_menu_selection(console)

            if choice == '1':
                show_reminders_ui(store)
            elif choice == '2':
                search_reminders_ui(store)
            elif choice == '3':
                add_reminder_ui(store)
            elif choice == '4':
                modify_reminder_ui(store)
            elif choice == '5':
                toggle_completion_ui(store)
            elif choice == EXIT_CHOICE:
                logging.info("User chose to exit the program.")
                break
    except (KeyboardInterrupt, EOFError):
        logging.info("Program terminated by user.")
    except Exception as e:
        logging.critical("Unexpected error in main loop: %s", e)
        print("An unexpected error occurred. Exiting the program.")
    print("\n  ❌  Exited application\n")


if __name__ == "__main__":
    main()
