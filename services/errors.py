class ValidationError(Exception):
    """Raised with a field -> message mapping when submitted values are rejected."""

    def __init__(self, errors):
        self.errors = dict(errors)
        super().__init__(', '.join(f"{k}: {v}" for k, v in self.errors.items()))


class EditInProgressError(Exception):
    def __init__(self, editing_id):
        self.editing_id = editing_id
        super().__init__(f"Application {editing_id} is already being edited")


class NoActiveEditError(Exception):
    pass


class ApplicationNotFoundError(LookupError):
    def __init__(self, application_id):
        self.application_id = application_id
        super().__init__(f"No application with id {application_id}")
