from preppulse.models.user import User
from preppulse.models.exam import Exam
from preppulse.models.question import Question
from preppulse.models.exam_attempt import ExamAttempt
from preppulse.models.question_response import QuestionResponse
from preppulse.models.topic_progress import TopicProgress

__all__ = ["User", "Exam", "Question", "ExamAttempt", "QuestionResponse", "TopicProgress"]
