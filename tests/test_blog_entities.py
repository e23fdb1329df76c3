from app.domains.blogs.entities import Blog


def test_create_blog_assigns_unique_ids():
    first = Blog.create_blog(title="A", author="B", content="C")
    second = Blog.create_blog(title="A", author="B", content="C")

    assert first.id
    assert first.id != second.id
    assert first != second


def test_apply_update_touches_only_supplied_fields():
    blog = Blog.create_blog(title="Old title", author="Jane", content="Body")
    original_id = blog.id

    blog.apply_update({"title": "New title", "id": "something-else", "views": 3})

    assert blog.id == original_id
    assert blog.title == "New title"
    assert blog.author == "Jane"
    assert blog.content == "Body"


def test_serialize_returns_projection():
    blog = Blog(id="abc", title="T", author="A", content="")

    assert blog.serialize() == {"id": "abc", "title": "T", "author": "A", "content": ""}
