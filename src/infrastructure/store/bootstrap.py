"""Sample profiles seeded into an empty or unreadable store."""

from datetime import date

from domain.entities.profile import Profile, utcnow


def bootstrap_profiles() -> list[Profile]:
    """Build the fixed four-record sample set, stamped with the current time."""
    now = utcnow()
    return [
        Profile(
            id="1",
            full_name="Sarah Johnson",
            email="sarah.johnson@example.com",
            phone_number="+1 (555) 123-4567",
            bio=(
                "Full-stack developer with a passion for creating intuitive user "
                "experiences. Love working with React, Node.js, and exploring new "
                "technologies."
            ),
            avatar_url=(
                "https://images.pexels.com/photos/1239291/pexels-photo-1239291.jpeg"
                "?auto=compress&cs=tinysrgb&w=400"
            ),
            date_of_birth=date(1990, 3, 15),
            location="San Francisco, CA",
            created_at=now,
            updated_at=now,
        ),
        Profile(
            id="2",
            full_name="Michael Chen",
            email="michael.chen@example.com",
            phone_number="+1 (555) 987-6543",
            bio=(
                "UX/UI Designer focused on creating meaningful digital experiences. "
                "Specializing in mobile-first design and accessibility."
            ),
            avatar_url=(
                "https://images.pexels.com/photos/2379004/pexels-photo-2379004.jpeg"
                "?auto=compress&cs=tinysrgb&w=400"
            ),
            date_of_birth=date(1988, 7, 22),
            location="New York, NY",
            created_at=now,
            updated_at=now,
        ),
        Profile(
            id="3",
            full_name="Emily Rodriguez",
            email="emily.rodriguez@example.com",
            phone_number="+1 (555) 456-7890",
            bio=(
                "Product manager with 8+ years of experience in tech startups. "
                "Passionate about user-centered product development."
            ),
            avatar_url=(
                "https://images.pexels.com/photos/1036623/pexels-photo-1036623.jpeg"
                "?auto=compress&cs=tinysrgb&w=400"
            ),
            date_of_birth=date(1985, 11, 8),
            location="Austin, TX",
            created_at=now,
            updated_at=now,
        ),
        Profile(
            id="4",
            full_name="David Kim",
            email="david.kim@example.com",
            phone_number="+1 (555) 321-0987",
            bio=(
                "DevOps engineer specializing in cloud infrastructure and automation. "
                "AWS certified with expertise in Docker and Kubernetes."
            ),
            avatar_url=(
                "https://images.pexels.com/photos/2182970/pexels-photo-2182970.jpeg"
                "?auto=compress&cs=tinysrgb&w=400"
            ),
            date_of_birth=date(1992, 1, 30),
            location="Seattle, WA",
            created_at=now,
            updated_at=now,
        ),
    ]
