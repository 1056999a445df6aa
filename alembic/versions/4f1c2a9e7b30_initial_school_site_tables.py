"""Initial school site tables

Revision ID: 4f1c2a9e7b30
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '4f1c2a9e7b30'
down_revision = None
branch_labels = None
depends_on = None

DEFAULT_PAGES = (
    ("home", "Welcome to Wesley High School"),
    ("about-us", "About Us"),
    ("admissions", "Admissions"),
    ("academics", "Academics"),
    ("student-life", "Student Life"),
)


def _dated_content_columns():
    return [
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
    ]


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('username', sa.String(length=80), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    op.create_table('news', *_dated_content_columns(), sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_news_date'), 'news', ['date'], unique=False)

    op.create_table('events',
        *_dated_content_columns(),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_events_date'), 'events', ['date'], unique=False)

    op.create_table('blog',
        *_dated_content_columns(),
        sa.Column('author', sa.String(length=100), nullable=False, server_default='Admin'),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_blog_date'), 'blog', ['date'], unique=False)
    op.create_index(op.f('ix_blog_slug'), 'blog', ['slug'], unique=True)

    op.create_table('news_events',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('media_type', sa.String(length=20), nullable=True),
        sa.Column('media_path', sa.String(length=500), nullable=True),
        sa.Column('is_news', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('event_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_news_events_created_at'), 'news_events', ['created_at'], unique=False)

    op.create_table('documents',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('url', sa.String(length=500), nullable=False),
        sa.Column('type', sa.String(length=100), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_documents_date'), 'documents', ['date'], unique=False)

    op.create_table('gallery_albums',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('images', sa.JSON(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_gallery_albums_date'), 'gallery_albums', ['date'], unique=False)

    op.create_table('carousel_images',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('path', sa.String(length=500), nullable=False),
        sa.Column('caption', sa.String(length=255), nullable=True),
        sa.Column('uploaded_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_carousel_images_uploaded_at'), 'carousel_images', ['uploaded_at'], unique=False)

    op.create_table('contact_inquiries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('subject', sa.String(length=255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_contact_inquiries_created_at'), 'contact_inquiries', ['created_at'], unique=False)

    pages = op.create_table('pages',
        sa.Column('slug', sa.String(length=100), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('hero_video_url', sa.String(length=500), nullable=True),
        sa.Column('hero_video_is_local', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('slug')
    )

    # Default pages
    op.bulk_insert(pages, [
        {'slug': slug, 'title': title, 'content': ''}
        for slug, title in DEFAULT_PAGES
    ])


def downgrade():
    op.drop_table('pages')
    op.drop_index(op.f('ix_contact_inquiries_created_at'), table_name='contact_inquiries')
    op.drop_table('contact_inquiries')
    op.drop_index(op.f('ix_carousel_images_uploaded_at'), table_name='carousel_images')
    op.drop_table('carousel_images')
    op.drop_index(op.f('ix_gallery_albums_date'), table_name='gallery_albums')
    op.drop_table('gallery_albums')
    op.drop_index(op.f('ix_documents_date'), table_name='documents')
    op.drop_table('documents')
    op.drop_index(op.f('ix_news_events_created_at'), table_name='news_events')
    op.drop_table('news_events')
    op.drop_index(op.f('ix_blog_slug'), table_name='blog')
    op.drop_index(op.f('ix_blog_date'), table_name='blog')
    op.drop_table('blog')
    op.drop_index(op.f('ix_events_date'), table_name='events')
    op.drop_table('events')
    op.drop_index(op.f('ix_news_date'), table_name='news')
    op.drop_table('news')
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
