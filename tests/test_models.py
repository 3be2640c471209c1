from core.models import Post
from core.presets import TRENDING_POSTS


def test_post_translated_copy():
    table = {"24 Apr, 2023": "24 Avr, 2023", "Data Science": "Science des Données"}
    post = Post(**TRENDING_POSTS[0])
    translated = post.translated(lambda key: table.get(key, key))
    assert translated.date == "24 Avr, 2023"
    assert translated.tags[0].name == "Science des Données"
    assert translated.title == post.title
    assert post.date == "24 Apr, 2023"
