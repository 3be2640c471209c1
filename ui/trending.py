import streamlit as st

from core.context import use_translation
from core.models import Post
from core.presets import TRENDING_POSTS
from ui.components import page_title
from ui.language_picker import render_language_picker


def render_post_card(post: Post):
    with st.container(border=True):
        if post.thumb:
            st.image(post.thumb)
        st.caption(post.date)
        st.markdown(f"**[{post.title}]({post.url})**")
        st.markdown(" ".join(f"[{tag.name}]({tag.url})" for tag in post.tags))
        st.caption(post.author.name)


def render_trending(posts=None):
    """Landing section listing trending posts in the current language."""
    i18n = use_translation()
    page_title("Trending Posts")
    render_language_picker()
    posts = [Post(**p) for p in (posts if posts is not None else TRENDING_POSTS)]
    cols = st.columns(3)
    for i, post in enumerate(posts):
        with cols[i % 3]:
            render_post_card(post.translated(i18n.t))
    st.link_button(i18n.t("Go To Blog"), "/blog")
