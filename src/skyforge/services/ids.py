import uuid


class UUIDGenerator:
    def generate(self) -> str:
        return str(uuid.uuid4())
