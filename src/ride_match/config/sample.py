# Three riders across three strategy configurations over a small fleet.
SAMPLE_SCENARIO = {
    "name": "sample",
    "run_id": "sample-1",
    "pricing": {"kind": "standard"},
    "dispatch": {"kind": "nearest"},
    "drivers": [
        {"id": 1, "name": "Maya", "rating": 4.98, "position": [1.0, 2.0]},
        {"id": 2, "name": "Leo", "rating": 4.67, "position": [5.0, 1.0]},
        {"id": 3, "name": "Amina", "rating": 4.85, "position": [3.0, 4.0]},
    ],
    "requests": [
        {"rider": {"id": 1, "name": "Alex", "pickup": [0.0, 0.0], "dropoff": [4.0, 3.0]}},
        {
            "rider": {"id": 2, "name": "Sam", "pickup": [10.0, 5.0], "dropoff": [2.0, 1.0]},
            "pricing": {"kind": "surge", "multiplier": 1.8},
            "dispatch": {"kind": "highest_rated"},
        },
        {
            # short hop: eco floor applies
            "rider": {"id": 3, "name": "Jamie", "pickup": [2.5, 2.0], "dropoff": [2.0, 2.2]},
            "pricing": {"kind": "eco"},
            "dispatch": {"kind": "nearest"},
        },
    ],
}
