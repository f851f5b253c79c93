SAMPLE_REQUEST = {
    "profile": {
        "net_worth": 500000,
        "city_tier": "tier1",
        "discretionary_spend_k": 12,
        "savings_habit_delta": 3,
    },
    "goals": {
        "wedding_year": 2028,
        "wedding_cost": 1200000,
        "house_year": 2032,
        "house_cost": 2500000,
    },
    "milestones": [
        {"year": 2030, "amount": 300000, "label": "Car"},
    ],
    "shock": {"amount": 500000, "year": 2027, "type": "medical"},
    "seed": 2025,
}
