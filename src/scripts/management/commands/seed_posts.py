"""Seed demo users and a set of sample posts."""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from authentication.managers import UserManager
from authentication.stores import UserStore
from posts.models import Post
from posts.stores import PostStore

SEED_USERS = [
    {"username": "root", "name": "Superuser", "password": "sekret"},
    {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
]

SEED_POSTS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
    },
    {
        "title": "First class tests",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
        "likes": 10,
    },
    {
        "title": "TDD harms architecture",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
        "likes": 0,
    },
    {
        "title": "Type wars",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
        "likes": 2,
    },
]


def create_seed_users():
    """Create the demo users if missing and return a username->User map."""
    User = get_user_model()
    users = {}
    for spec in SEED_USERS:
        user, _ = User.objects.get_or_create(
            username=spec["username"],
            defaults={
                "name": spec["name"],
                "password_hash": UserManager.hash_password(spec["password"]),
            },
        )
        users[user.username] = user
    return users


def create_seed_posts(owner=None):
    """Insert the sample posts, owned by ``owner`` when given.

    Owned posts are recorded on the owner's post list the same way the API
    does it. Returns the ids of the inserted posts.
    """
    post_store = PostStore()
    user_store = UserStore()
    post_ids = []
    for spec in SEED_POSTS:
        post_id = post_store.insert({**spec, "owner": owner.pk if owner else None})
        if owner is not None:
            user_store.append_post(owner.pk, post_id)
        post_ids.append(post_id)
    return post_ids


class Command(BaseCommand):
    """Management command to seed demo users and posts."""

    help = (
        "Seed demo users and sample posts owned by the first demo user. "
        "Use --reset to delete all posts and the demo users first."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete every post and the demo users before seeding.",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        if options.get("reset"):
            self._reset_seeded_data()

        self.stdout.write("Seeding posts...")
        users = create_seed_users()
        post_ids = create_seed_posts(owner=users[SEED_USERS[0]["username"]])
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(users)} users and {len(post_ids)} posts."))

    def _reset_seeded_data(self) -> None:
        self.stdout.write("Resetting posts and demo users...")
        Post.objects.all().delete()
        get_user_model().objects.filter(username__in=[u["username"] for u in SEED_USERS]).delete()
        self.stdout.write(self.style.WARNING("Posts and demo users cleared."))
