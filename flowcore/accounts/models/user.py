# ============================================
# accounts/models/user.py
# ============================================
from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models

from core.models import TimeStampedModel


class UserManager(BaseUserManager):
    use_in_migrations = True

    @classmethod
    def normalize_email(cls, email):
        return (email or '').strip().lower()

    def get_by_natural_key(self, email):
        return self.get(email__iexact=email)

    def create_user(self, email, password=None, *, name='', role='member', **extra):
        if not email:
            raise ValueError('Email is required')
        user = self.model(email=self.normalize_email(email), name=name, role=role, **extra)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra):
        extra.setdefault('role', User.Role.CEO)
        return self.create_user(email, password, **extra)


class User(AbstractBaseUser, TimeStampedModel):
    class Role(models.TextChoices):
        CEO = 'ceo', 'CEO'
        MANAGER = 'manager', 'Manager'
        MEMBER = 'member', 'Member'

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True, db_index=True)
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.MEMBER, db_index=True)
    is_active = models.BooleanField(default=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'users'
        ordering = ['id']

    def save(self, *args, **kwargs):
        self.email = UserManager.normalize_email(self.email)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} <{self.email}> ({self.role})"
