from app.core.repository import DocumentRepository


class SpeciesRepository(DocumentRepository):
    collection_name = "species"
