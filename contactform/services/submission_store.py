"""
Persistence of contact submissions in MongoDB.

save() reports every failure as StoreError. try_save() is the boundary the
request handler uses: it turns any failure into False so a dead database
never aborts a request.
"""

import logging
from typing import Optional

from pymongo.errors import ConnectionFailure, PyMongoError

from contactform.core.config import Settings, get_settings
from contactform.core.errors import StoreError
from contactform.db import mongo
from contactform.db.init_db import CONTACTS_COLLECTION
from contactform.models.contact import Submission

logger = logging.getLogger(__name__)


class SubmissionStore:
    def __init__(self, settings: Optional[Settings] = None,
                 collection_name: str = CONTACTS_COLLECTION):
        self.settings = settings or get_settings()
        self.collection_name = collection_name

    def _collection(self):
        try:
            db = mongo.get_db(self.settings)
        except ValueError as e:
            raise StoreError(str(e)) from e
        return db[self.collection_name]

    async def save(self, submission: Submission) -> str:
        """
        Insert the submission.

        Returns:
            str: Inserted document id

        Raises:
            StoreError: not configured, unreachable, or the write was rejected
        """
        collection = self._collection()
        try:
            result = await collection.insert_one(submission.to_document())
        except ConnectionFailure as e:
            # Drop the cached client so the next request reconnects
            mongo.reset_client()
            raise StoreError(f"MongoDB unavailable: {str(e)}") from e
        except PyMongoError as e:
            raise StoreError(f"MongoDB rejected the submission: {str(e)}") from e

        inserted_id = str(result.inserted_id)
        logger.info(f"✅ Contact form data saved to database ({inserted_id})")
        return inserted_id

    async def try_save(self, submission: Submission) -> bool:
        try:
            await self.save(submission)
            return True
        except StoreError as e:
            logger.error(f"❌ Error saving to database: {str(e)}")
        except Exception as e:
            logger.error(f"❌ Unexpected error saving to database: {str(e)}", exc_info=True)
        return False
