# ride_match/app/report.py
from collections.abc import Iterable

from ride_match.app.build import Outcome
from ride_match.domain.entities.driver import Driver
from ride_match.domain.trip import Trip


def format_trip(trip: Trip) -> str:
    return (
        f"Trip #{trip.id} ({trip.pricing_model}, {trip.dispatch_model})\n"
        f"  Rider: {trip.rider_name} -> Driver: {trip.driver_name}\n"
        f"  Distance: {trip.distance_km:.2f} km, Duration: {trip.duration_minutes:.2f} min, "
        f"Fare: ${trip.fare:.2f}\n"
    )


def format_outcome(out: Outcome) -> str:
    if out.trip is None:
        return f"No driver available for {out.rider.name}\n"
    return format_trip(out.trip)


def format_drivers(drivers: Iterable[Driver]) -> str:
    lines = ["Drivers:"]
    for d in drivers:
        lines.append(
            f"  #{d.id} {d.name} | Rating: {d.rating:.2f}"
            f" | Position: ({d.position.x:.2f}, {d.position.y:.2f})"
        )
    return "\n".join(lines) + "\n"
