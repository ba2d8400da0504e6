from spaces_provider.models.file import StoredFile, file_attr, set_file_url

__all__ = ["StoredFile", "file_attr", "set_file_url"]
