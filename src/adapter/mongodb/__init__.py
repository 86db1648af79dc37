USERS_COLLECTION_NAME = 'users'
CONTACTS_COLLECTION_NAME = 'contacts'
