"""Cardholder name generator for synthetic data."""

import random

FIRST_NAMES = [
    "Aarav",
    "Priya",
    "Rohan",
    "Ananya",
    "Vikram",
    "Kavya",
    "Arjun",
    "Meera",
    "Rahul",
    "Sneha",
    "James",
    "Emily",
    "Michael",
    "Olivia",
    "Daniel",
    "Sophia",
    "David",
    "Jane",
    "Robert",
    "Grace",
]

LAST_NAMES = [
    "Sharma",
    "Patel",
    "Iyer",
    "Reddy",
    "Gupta",
    "Nair",
    "Kapoor",
    "Mehta",
    "Singh",
    "Rao",
    "Smith",
    "Johnson",
    "Williams",
    "Brown",
    "Garcia",
    "Miller",
    "Davis",
    "Wilson",
    "Clark",
    "Lewis",
]


def random_full_name() -> str:
    return f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}"
