"""
Business logic services.

Services handle the application logic between API and database.
"""
from lichsu.services import ordering_service
from lichsu.services import period_service
from lichsu.services import integrity_service
from lichsu.services import content_service
