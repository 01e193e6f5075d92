"""
Sample data.

Idempotent: users are matched by email, posts by (author, title), so
running the seed twice leaves the database unchanged.
"""

import logging
from typing import Optional

from sqlmodel import Session, select

from starter_api.models.comment import Comment
from starter_api.models.post import Post
from starter_api.models.user import User, UserRole

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {
        "email": "admin@example.com",
        "name": "Admin User",
        "role": UserRole.ADMIN,
        "avatar": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150&h=150&fit=crop&crop=face",
    },
    {
        "email": "john@example.com",
        "name": "John Doe",
        "role": UserRole.USER,
        "avatar": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop&crop=face",
    },
    {
        "email": "jane@example.com",
        "name": "Jane Smith",
        "role": UserRole.MODERATOR,
        "avatar": "https://images.unsplash.com/photo-1494790108755-2616b612b786?w=150&h=150&fit=crop&crop=face",
    },
]

# (author email, title, content, published)
SAMPLE_POSTS = [
    ("admin@example.com", "Welcome to the starter", "What ships in this template and how to extend it.", True),
    ("john@example.com", "Pagination notes", "Pages are 1-based; hasMore tells you when to stop.", True),
    ("jane@example.com", "Draft: moderation guide", None, False),
]

# (author email, post title, content)
SAMPLE_COMMENTS = [
    ("john@example.com", "Welcome to the starter", "Thanks, this saved me a day."),
    ("jane@example.com", "Welcome to the starter", "Looks good."),
    ("admin@example.com", "Pagination notes", "Worth adding an example with filters."),
]


def _get_or_create_user(session: Session, values: dict) -> User:
    user = session.exec(select(User).where(User.email == values["email"])).first()
    if user is None:
        user = User(**values)
        session.add(user)
        session.flush()
    return user


def _get_or_create_post(session: Session, author: User, title: str, content: Optional[str], published: bool) -> Post:
    statement = select(Post).where(Post.author_id == author.id, Post.title == title)
    post = session.exec(statement).first()
    if post is None:
        post = Post(author_id=author.id, title=title, content=content, published=published)
        session.add(post)
        session.flush()
    return post


def seed(session: Session) -> dict[str, int]:
    """
    Insert the sample users, posts and comments that are missing.

    Returns:
        Number of users, posts and comments present after seeding
    """
    users = {values["email"]: _get_or_create_user(session, values) for values in SAMPLE_USERS}

    posts = {}
    for email, title, content, published in SAMPLE_POSTS:
        posts[title] = _get_or_create_post(session, users[email], title, content, published)

    comments = 0
    for email, title, content in SAMPLE_COMMENTS:
        author, post = users[email], posts[title]
        statement = select(Comment).where(Comment.author_id == author.id, Comment.post_id == post.id,
                                          Comment.content == content)
        if session.exec(statement).first() is None:
            session.add(Comment(author_id=author.id, post_id=post.id, content=content))
        comments += 1

    session.commit()
    logger.info("Seeded %d users, %d posts, %d comments", len(users), len(posts), comments)
    return {"users": len(users), "posts": len(posts), "comments": comments}
