import logging

from bs4 import BeautifulSoup

from f95postparser.config import HTML_PARSER
from f95postparser.logging_config import logger
from f95postparser.normalize import clean_formatted_text, clean_link_node, parse_spoilers
from f95postparser.pairing import pair_up_title_with_content
from f95postparser.prune import prune_nodes_with_unnecessary_values, prune_tree
from f95postparser.tree import build_tree, count_nodes, format_tree

POST_BODY_SELECTOR = "article.message-body > div.bbWrapper"


def extract_data_from_post(fragment):
    """
    Given the body of a post, extracts the information it contains.

    `fragment` is the BeautifulSoup node of the message body, i.e. the
    `div.bbWrapper` of the first post of a thread.
    """
    # First create the tree struct of the post
    root = build_tree(fragment)
    logger.debug(f"Built post tree with {count_nodes(root)} nodes")

    # Remove all empty elements from the tree
    root = prune_tree(root)
    logger.debug(f"Pruned post tree to {count_nodes(root)} nodes")

    root = clean_link_node(root)
    root = clean_formatted_text(root)
    root = parse_spoilers(root)
    root = prune_nodes_with_unnecessary_values(root)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Normalized post tree:\n{format_tree(root)}")

    elements = pair_up_title_with_content(root)
    logger.info(f"Extracted {len(elements)} elements from post body: {[e.name for e in elements]}")
    return elements


def find_post_body(soup):
    """Isolates the message body of the first post, falls back to the whole document."""
    body = soup.select_one(POST_BODY_SELECTOR)
    if body is None:
        body = soup.find('div', class_='bbWrapper')
    if body is None:
        logger.warning("No post body found in the page, using the whole document")
        body = soup
    return body


def extract_data_from_html(html_content, parser=HTML_PARSER):
    """Parses raw HTML (a thread page or a bare post body) and extracts its elements."""
    if not html_content:
        logger.warning("Empty HTML content, nothing to extract")
        return []

    soup = BeautifulSoup(html_content, parser)
    return extract_data_from_post(find_post_body(soup))
