from datetime import datetime


class ChatMessage:
    def __init__(self, user_id, message, response, category):
        self.user_id = user_id
        self.message = message
        self.response = response
        self.category = category
        self.timestamp = datetime.utcnow()

    def to_dict(self):
        return {
            "userId": self.user_id,
            "message": self.message,
            "response": self.response,
            "category": self.category,
            "timestamp": self.timestamp,
            "createdAt": self.timestamp,
        }
