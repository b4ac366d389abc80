"""
Firestore user store.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

from google.cloud import firestore
from google.oauth2 import service_account

from docuseal_app.config import get_settings
from docuseal_app.models.user import UserInDB

settings = get_settings()

USERS_COLLECTION = "users"


class FirestoreService:
    """Service for Firestore user operations."""

    def __init__(self):
        """Initialize Firestore client."""
        if settings.google_application_credentials:
            credentials = service_account.Credentials.from_service_account_file(
                settings.google_application_credentials
            )
            self.db = firestore.Client(
                project=settings.gcp_project_id,
                credentials=credentials
            )
        else:
            # Use default credentials (for local development with gcloud auth)
            self.db = firestore.Client(project=settings.gcp_project_id)

    async def create_user(
        self,
        email: str,
        password_hash: str,
        name: Optional[str] = None,
        created_by: Optional[str] = None
    ) -> UserInDB:
        """Create a new user."""
        user_id = str(uuid.uuid4())
        user_data = {
            "id": user_id,
            "email": email,
            "name": name,
            "password_hash": password_hash,
            "created_at": datetime.now(timezone.utc),
            "created_by": created_by,
        }

        self.db.collection(USERS_COLLECTION).document(user_id).set(user_data)

        return UserInDB(**user_data)

    async def get_user_by_id(self, user_id: str) -> Optional[UserInDB]:
        """Get user by ID."""
        doc = self.db.collection(USERS_COLLECTION).document(user_id).get()
        if doc.exists:
            return UserInDB(**doc.to_dict())
        return None

    async def get_user_by_email(self, email: str) -> Optional[UserInDB]:
        """Get user by email."""
        query = self.db.collection(USERS_COLLECTION).where("email", "==", email).limit(1)
        docs = query.stream()

        for doc in docs:
            return UserInDB(**doc.to_dict())
        return None
