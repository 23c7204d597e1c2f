from pydantic import BaseModel
from typing import Optional, List
import datetime as dt

class UserStatsSummary(BaseModel):
    questions_answered: int = 0
    correct_answers: int = 0
    accuracy: int = 0
    study_time: int = 0  # hours
    current_streak: int = 0
    best_score: int = 0
    avg_score: int = 0
    total_attempts: int = 0

class RecentSession(BaseModel):
    id: int
    topic: str
    subject: Optional[str] = None
    score: int
    questions: int
    correct: int
    time: str
    date: Optional[dt.date] = None

class TopicProgressItem(BaseModel):
    subject: str
    topic: str
    questions: int
    correct: int
    progress: int
    last_practiced: Optional[dt.datetime] = None

class UserStats(BaseModel):
    stats: UserStatsSummary
    recent_sessions: List[RecentSession] = []
    topic_progress: List[TopicProgressItem] = []

class AdminStatsSummary(BaseModel):
    total_users: int = 0
    new_users_today: int = 0
    total_exams: int = 0
    total_questions: int = 0
    questions_added_today: int = 0
    total_topics: int = 0
    active_sessions: int = 0

class RecentUser(BaseModel):
    id: int
    name: str
    email: str
    role: str
    joined: Optional[dt.date] = None
    status: str
    score: int

class RecentExam(BaseModel):
    id: int
    topic: str
    subject: Optional[str] = None
    difficulty: str
    type: str = "Exam"
    status: str
    created: Optional[dt.date] = None
    question_count: int

class QuestionDistributionItem(BaseModel):
    subject: str
    count: int
    percentage: int

class UserGrowthPoint(BaseModel):
    date: dt.date
    count: int

class AdminStats(BaseModel):
    stats: AdminStatsSummary
    recent_users: List[RecentUser] = []
    recent_exams: List[RecentExam] = []
    question_distribution: List[QuestionDistributionItem] = []
    user_growth: List[UserGrowthPoint] = []
