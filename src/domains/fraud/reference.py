"""Static reference catalog offered to callers for input constraints."""

from .models import MerchantCategory

LOCATIONS: dict[str, list[str]] = {
    "indian_cities": [
        "Mumbai, India",
        "Delhi, India",
        "Bangalore, India",
        "Hyderabad, India",
        "Chennai, India",
        "Kolkata, India",
        "Pune, India",
        "Ahmedabad, India",
        "Jaipur, India",
        "Lucknow, India",
    ],
    "american_cities": [
        "New York, USA",
        "Los Angeles, USA",
        "Chicago, USA",
        "Houston, USA",
        "Austin, USA",
        "San Francisco, USA",
        "Seattle, USA",
        "Miami, USA",
        "Boston, USA",
        "Atlanta, USA",
    ],
    "world_cities": [
        "London, UK",
        "Paris, France",
        "Berlin, Germany",
        "Tokyo, Japan",
        "Singapore, Singapore",
        "Dubai, UAE",
        "Sydney, Australia",
        "Toronto, Canada",
        "Moscow, Russia",
        "Lagos, Nigeria",
        "Accra, Ghana",
        "Karachi, Pakistan",
        "Kyiv, Ukraine",
        "Minsk, Belarus",
        "Beijing, China",
        "Hanoi, Vietnam",
        "Jakarta, Indonesia",
        "Bucharest, Romania",
        "Sofia, Bulgaria",
    ],
}

MERCHANT_CATEGORY_LABELS: dict[MerchantCategory, str] = {
    MerchantCategory.RETAIL: "Retail",
    MerchantCategory.ONLINE_SHOPPING: "Online Shopping",
    MerchantCategory.GAS_STATION: "Gas Station",
    MerchantCategory.RESTAURANT: "Restaurant",
    MerchantCategory.TRAVEL: "Travel",
    MerchantCategory.ENTERTAINMENT: "Entertainment",
    MerchantCategory.UTILITIES: "Utilities",
    MerchantCategory.HEALTHCARE: "Healthcare",
    MerchantCategory.OTHER: "Other",
}
