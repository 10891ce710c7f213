"""
Database initialization for the contact-form backend.
Makes sure the contacts collection and its indexes exist when the server
starts. Safe to call repeatedly; only missing pieces are created.
"""

import logging
from pymongo.errors import PyMongoError
from contactform.db.mongo import get_db

# Set up logger
logger = logging.getLogger(__name__)

CONTACTS_COLLECTION = "contacts"

REQUIRED_COLLECTIONS = [
    {
        "name": CONTACTS_COLLECTION,
        "description": "Stores contact form submissions",
        "indexes": [
            {"keys": [("createdAt", -1)], "unique": False},
            {"keys": [("email", 1)], "unique": False},
        ]
    }
]


async def collection_exists(db, collection_name):
    try:
        collections = await db.list_collection_names()
        return collection_name in collections
    except Exception as e:
        logger.error(f"Error checking if collection '{collection_name}' exists: {str(e)}")
        return False


async def create_collection_with_indexes(db, collection_config):
    """
    Create a collection with its required indexes if it doesn't exist.

    Args:
        db: MongoDB database connection
        collection_config (dict): Collection configuration with name, description, and indexes

    Returns:
        bool: True if successful, False otherwise
    """
    collection_name = collection_config["name"]
    description = collection_config.get("description", "")

    try:
        if await collection_exists(db, collection_name):
            logger.info(f"✅ Collection '{collection_name}' already exists")
        else:
            logger.info(f"🔄 Creating collection '{collection_name}': {description}")
            await db.create_collection(collection_name)

        collection = db[collection_name]
        for index_config in collection_config.get("indexes", []):
            keys = index_config["keys"]
            options = {k: v for k, v in index_config.items() if k != "keys"}
            try:
                await collection.create_index(keys, **options)
                logger.debug(f"✅ Index {keys} ensured for '{collection_name}'")
            except PyMongoError as e:
                logger.warning(f"Failed to create index {keys} for '{collection_name}': {str(e)}")

        return True

    except PyMongoError as e:
        logger.error(f"❌ Failed to create collection '{collection_name}': {str(e)}")
        return False


async def initialize_database(settings=None):
    """
    Create all required collections and indexes.

    Returns:
        bool: True if every collection is ready, False otherwise
    """
    logger.info("🚀 Starting database initialization...")

    try:
        db = get_db(settings)
    except ValueError as e:
        logger.warning(f"⚠️ Skipping database initialization: {str(e)}")
        return False

    error_count = 0
    for collection_config in REQUIRED_COLLECTIONS:
        if not await create_collection_with_indexes(db, collection_config):
            error_count += 1

    if error_count == 0:
        logger.info(f"🎉 Database '{db.name}' initialized")
        return True

    logger.warning(f"⚠️ Database initialization completed with {error_count} error(s)")
    return False
