"""Static seed collections loaded into every fresh ``AppState``.

Each function returns new model instances so that mutating one state never
leaks into another.
"""
from typing import Dict, List

from yultimate.models import (
    AdminUser,
    Alert,
    Assessment,
    Child,
    CoachingCenter,
    CoachUser,
    Community,
    EventModel,
    GalleryImage,
    HomeVisit,
    Organization,
    OrganizerUser,
    ParticipantUser,
    PlayerStat,
    Session,
    Team,
    Venue,
)


def seed_users() -> list:
    return [
        AdminUser(id="U001", name="Admin User", email="admin@yultimate.org"),
        OrganizerUser(id="U002", name="Organizer User", email="organizer@yultimate.org", org_name="Y-Ultimate Sports"),
        ParticipantUser(id="U003", name="Participant User", email="participant@yultimate.org", qr_code="QR-U003"),
        ParticipantUser(id="U004", name="Jane Doe", email="jane@yultimate.org", qr_code="QR-U004"),
        ParticipantUser(id="U005", name="John Smith", email="john@yultimate.org", qr_code="QR-U005"),
        OrganizerUser(id="U006", name="Alice Johnson", email="alice@yultimate.org", org_name="Community Frisbee League"),
        CoachUser(id="U007", name="Coach Ramesh", email="ramesh@yultimate.org", communities=["VV Puram"], experience_years=6),
        CoachUser(id="U008", name="Coach Priya", email="priya@yultimate.org", communities=["Lalithadripura"], experience_years=4),
    ]


def seed_organizations() -> List[Organization]:
    return [
        Organization(id=1, name="Y-Ultimate Sports", organizers=["U002", "U006"]),
        Organization(id=2, name="Community Frisbee League", organizers=["U006"]),
    ]


def seed_venues() -> List[Venue]:
    return [
        Venue(id=1, name="City Park Fields", location="123 Park Ave, Cityville", coordinates={"lat": 40.7128, "lng": -74.0060}),
        Venue(id=2, name="University Stadium", location="456 University Dr, Townsville", coordinates={"lat": 34.0522, "lng": -118.2437}),
        Venue(id=3, name="Beachfront Arena", location="789 Ocean Blvd, Beachtown", coordinates={"lat": 33.7701, "lng": -118.1937}),
    ]


def seed_events() -> List[EventModel]:
    return [
        EventModel(
            id=1,
            name="Summer Breeze Tournament",
            date="2024-07-20T09:00:00Z",
            description="Annual summer ultimate frisbee tournament. All levels welcome.",
            venue_id=1,
            organization_id=1,
            type="Tournament",
            participants=["U003", "U004", "U005"],
            winners={"first": "John Smith", "second": "Jane Doe", "third": "Participant User"},
        ),
        EventModel(
            id=2,
            name="Advanced Throws Workshop",
            date="2024-08-05T14:00:00Z",
            description="Learn advanced throwing techniques from pro players.",
            venue_id=2,
            organization_id=1,
            type="Workshop",
            participants=["U003", "U005"],
        ),
        EventModel(
            id=3,
            name="Weekly Pickup Game",
            date="2024-07-25T18:00:00Z",
            description="Casual pickup games for the community.",
            venue_id=1,
            organization_id=2,
            type="Meetup",
            participants=["U003", "U004", "U005"],
        ),
        EventModel(
            id=4,
            name="Beach Ultimate Championship",
            date="2024-09-10T10:00:00Z",
            description="The final championship on the sunny beaches.",
            venue_id=3,
            organization_id=2,
            type="Tournament",
            participants=["U004", "U005"],
        ),
    ]


def seed_coaching_centers() -> List[CoachingCenter]:
    return [
        CoachingCenter(
            id=1,
            name="Ultimate Performance Academy",
            specialty="Advanced Skills",
            location="Cityville",
            participants=["U003"],
            coordinates={"lat": 40.7328, "lng": -74.0160},
            description="High-intensity training for competitive players.",
            fee=2500,
            schedule="Mon, Wed, Fri 6-8 PM",
        ),
        CoachingCenter(
            id=2,
            name="Frisbee Fundamentals",
            specialty="Beginner Training",
            location="Townsville",
            participants=[],
            coordinates={"lat": 34.0622, "lng": -118.2537},
            description="Throwing, catching and the spirit of the game for newcomers.",
            fee=1000,
            schedule="Sat 9-11 AM",
        ),
        CoachingCenter(
            id=3,
            name="Beach Ultimate Coaching",
            specialty="Beach Tactics",
            location="Beachtown",
            participants=["U004", "U005"],
            coordinates={"lat": 33.7901, "lng": -118.2037},
            description="Sand footwork, wind reading and beach formats.",
            fee=1800,
            schedule="Sun 7-9 AM",
        ),
    ]


def seed_children() -> List[Child]:
    return [
        Child(id="CH001", name="Aarav Kumar", gender="Male", age=12, community="VV Puram", school="Viveka School"),
        Child(id="CH002", name="Sneha Rao", gender="Female", age=13, community="Lalithadripura", school="Vivekananda High"),
        Child(id="CH003", name="Rohan Patel", gender="Male", age=11, community="VV Puram", school="Viveka School"),
    ]


def seed_sessions() -> List[Session]:
    return [
        Session(id="S001", date="2025-10-20T10:00:00Z", community="VV Puram", coach="Coach Ramesh", participants=["CH001", "CH003"], status="completed"),
        Session(id="S002", date="2025-10-22T10:00:00Z", community="Lalithadripura", coach="Coach Priya", participants=["CH002"], status="completed"),
        Session(id="S003", date="2025-10-27T10:00:00Z", community="VV Puram", coach="Coach Ramesh", participants=[], status="upcoming"),
        Session(id="S004", date="2025-10-29T10:00:00Z", community="Lalithadripura", coach="Coach Priya", participants=[], status="upcoming"),
    ]


def seed_assessments() -> List[Assessment]:
    return [
        Assessment(child_id="CH001", date="2025-09-10T10:00:00Z", type="Baseline", score={"teamwork": 7, "confidence": 8, "communication": 6}),
        Assessment(child_id="CH001", date="2025-10-18T10:00:00Z", type="Endline", score={"teamwork": 8, "confidence": 9, "communication": 7}),
        Assessment(child_id="CH002", date="2025-09-11T10:00:00Z", type="Baseline", score={"teamwork": 6, "confidence": 7, "communication": 8}),
    ]


def seed_home_visits() -> List[HomeVisit]:
    return [
        HomeVisit(
            id="HV001",
            child_id="CH001",
            date="2025-10-15T10:00:00Z",
            notes="Discussed progress with Aarav and his parents. They are very happy with his development in the program.",
        ),
        HomeVisit(
            id="HV002",
            child_id="CH002",
            date="2025-10-16T10:00:00Z",
            notes="Initial home visit. Sneha is excited to participate. Parents are supportive and keen to see her develop new skills.",
        ),
    ]


def seed_alerts() -> List[Alert]:
    return [
        Alert(id=1, message="Attendance missing for Session S002", type="destructive"),
        Alert(id=2, message="Endline assessment due for Sneha Rao", type="default"),
    ]


def seed_communities() -> List[Community]:
    return [
        Community(name="VV Puram", coordinates={"lat": 12.2958, "lng": 76.6394}, children=30),
        Community(name="Lalithadripura", coordinates={"lat": 12.2710, "lng": 76.6930}, children=22),
    ]


def seed_teams() -> List[Team]:
    return [
        Team(id="T01", name="Disc Jockeys", wins=12, losses=3, spirit_score=13.5),
        Team(id="T02", name="Sky Walkers", wins=10, losses=5, spirit_score=14.2),
        Team(id="T03", name="Huck Finns", wins=9, losses=6, spirit_score=12.8),
        Team(id="T04", name="Layout Legends", wins=7, losses=8, spirit_score=14.8),
        Team(id="T05", name="Zone Breakers", wins=4, losses=11, spirit_score=11.9),
    ]


def seed_player_stats() -> List[PlayerStat]:
    return [
        PlayerStat(id="PS01", name="John Smith", team="Disc Jockeys", score=42, assists=18),
        PlayerStat(id="PS02", name="Jane Doe", team="Sky Walkers", score=38, assists=25),
        PlayerStat(id="PS03", name="Participant User", team="Huck Finns", score=29, assists=12),
        PlayerStat(id="PS04", name="Alice Johnson", team="Layout Legends", score=33, assists=20),
        PlayerStat(id="PS05", name="Aarav Kumar", team="Zone Breakers", score=15, assists=9),
    ]


def seed_placeholder_images() -> List[GalleryImage]:
    return [
        GalleryImage(id=f"gallery-{n}", url=f"https://picsum.photos/seed/yultimate{n}/800/600", description=description, hint=hint)
        for n, (description, hint) in enumerate(
            [
                ("Opening pull of the final", "frisbee game"),
                ("Team huddle before the match", "team huddle"),
                ("Layout catch in the end zone", "frisbee catch"),
                ("Spirit circle after the game", "team circle"),
                ("Forehand drills at the workshop", "frisbee throw"),
                ("Pickup game at sunset", "park game"),
                ("Beach point in progress", "beach frisbee"),
                ("Podium and medals", "award ceremony"),
            ],
            start=1,
        )
    ]


def seed_temp_images() -> Dict[int, List[GalleryImage]]:
    return {}
