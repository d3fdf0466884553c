"""Card transaction generator with fraud injection."""

import random
from datetime import datetime, timedelta
from typing import Any

from src.domains.fraud.models import MerchantCategory
from src.domains.fraud.reference import LOCATIONS

from .base import BaseGenerator
from .utils.cards import ISSUER_FORMATS, corrupt_card_number, generate_card_number
from .utils.distributions import log_normal_sample, micro_amount
from .utils.names import random_full_name

DEFAULT_CATEGORY_WEIGHTS = {
    "retail": 0.25,
    "online_shopping": 0.20,
    "restaurant": 0.15,
    "gas_station": 0.10,
    "utilities": 0.08,
    "travel": 0.07,
    "entertainment": 0.07,
    "healthcare": 0.05,
    "other": 0.03,
}

HIGH_RISK_LOCATIONS = [
    "Moscow, Russia",
    "Lagos, Nigeria",
    "Accra, Ghana",
    "Karachi, Pakistan",
    "Kyiv, Ukraine",
    "Minsk, Belarus",
]

MERCHANTS = {
    "retail": ["City Mart", "Style Hub", "HomeGoods Corner"],
    "online_shopping": ["Amazon Store", "Flipkart", "ShopNow Online"],
    "restaurant": ["Spice Garden", "Blue Diner", "Cafe Aroma"],
    "gas_station": ["FuelPoint", "QuickGas", "Highway Petrol"],
    "utilities": ["PowerGrid Billing", "City Water Co"],
    "travel": ["SkyHigh Airlines", "TripEasy", "RailConnect"],
    "entertainment": ["StreamMax", "CinemaWorld", "GameVault"],
    "healthcare": ["CareWell Pharmacy", "City Clinic"],
    "other": ["Misc Services"],
}


class CardTransactionGenerator(BaseGenerator):
    """Produces Transaction payloads (dicts) for demos and load tests.

    Config keys:
        num_cardholders, time_span_days, amount_distribution,
        category_weights, card_testing_rate, high_risk_location_rate,
        invalid_card_rate, late_night_rate
    """

    def generate(self, num_transactions: int = 1000) -> list[dict[str, Any]]:
        config = self.config
        num_cardholders = config.get("num_cardholders", 100)
        time_span = config.get("time_span_days", 30)
        base_time = datetime(2026, 1, 1)
        end_time = base_time + timedelta(days=time_span)
        category_weights = config.get("category_weights", DEFAULT_CATEGORY_WEIGHTS)
        amount_dist = config.get(
            "amount_distribution", {"log_normal_mean": 7.5, "log_normal_std": 1.3}
        )
        home_locations = LOCATIONS["indian_cities"] + LOCATIONS["american_cities"]

        cardholders = [
            {
                "cardholder_name": random_full_name(),
                "card_number": generate_card_number(random.choice(list(ISSUER_FORMATS))),
                "home_location": random.choice(home_locations),
            }
            for _ in range(num_cardholders)
        ]

        transactions: list[dict[str, Any]] = []
        while len(transactions) < num_transactions:
            holder = random.choice(cardholders)
            category = self._weighted_choice(category_weights)
            txn_time = self._random_datetime(base_time, end_time)
            amount = log_normal_sample(
                self.rng,
                amount_dist["log_normal_mean"],
                amount_dist["log_normal_std"],
                min_val=100.0,
                max_val=500_000.0,
            )
            card_number = holder["card_number"]
            location = holder["home_location"]

            # Fraud injection: card-testing burst of micro amounts
            if random.random() < config.get("card_testing_rate", 0.0):
                for minute in range(random.randint(5, 8)):
                    transactions.append(
                        self._payload(
                            holder,
                            card_number,
                            micro_amount(self.rng),
                            "online_shopping",
                            location,
                            txn_time + timedelta(minutes=minute),
                        )
                    )
                continue

            if random.random() < config.get("high_risk_location_rate", 0.0):
                location = random.choice(HIGH_RISK_LOCATIONS)
            if random.random() < config.get("invalid_card_rate", 0.0):
                card_number = corrupt_card_number(card_number)
            if random.random() < config.get("late_night_rate", 0.0):
                txn_time = txn_time.replace(hour=random.randint(2, 4))

            transactions.append(
                self._payload(holder, card_number, amount, category, location, txn_time)
            )

        transactions = transactions[:num_transactions]
        transactions.sort(key=lambda t: t["transaction_time"])
        return transactions

    def _payload(
        self,
        holder: dict[str, str],
        card_number: str,
        amount: float,
        category: str,
        location: str,
        txn_time: datetime,
    ) -> dict[str, Any]:
        return {
            "card_number": card_number,
            "cardholder_name": holder["cardholder_name"],
            "amount": amount,
            "merchant_name": random.choice(MERCHANTS[category]),
            "merchant_category": MerchantCategory(category).value,
            "location": location,
            "transaction_time": txn_time.isoformat(),
        }
