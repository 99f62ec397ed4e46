"""Infrastructure: Firestore REST client and document store backends."""
