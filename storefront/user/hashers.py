from django.contrib.auth import hashers


class BCryptPasswordHasher(hashers.BCryptPasswordHasher):
    """Plain bcrypt with a cost factor of 10."""

    rounds = 10
