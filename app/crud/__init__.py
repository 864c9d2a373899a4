from app.crud.user import user_crud
from app.crud.folder import folder_crud
from app.crud.note import note_crud

__all__ = ["user_crud", "folder_crud", "note_crud"]
