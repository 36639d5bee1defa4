from collab.constants.messages import ApiErrors


class UpdateNotFoundException(Exception):
    def __init__(self, update_id: str | None = None, message: str = ApiErrors.UPDATE_NOT_FOUND):
        self.update_id = update_id
        self.message = message
        super().__init__(self.message)
