from app.core.repository import DocumentRepository


class CategoryRepository(DocumentRepository):
    collection_name = "categories"
