from app.core.repository import DocumentRepository


class AnimalRepository(DocumentRepository):
    collection_name = "animals"
