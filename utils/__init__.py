import re
import os
import json
import logging
from logging import Logger
from nltk.tokenize import WhitespaceTokenizer

from config import LOG_DIR

#
whitespace_tokenizer = WhitespaceTokenizer()
re_non_word = re.compile(r"[^\w\s]")

def get_logger(name, filename=None):
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    # loggers are process wide, only attach handlers the first time
    if logger.handlers:
        return logger
    if not os.path.exists(LOG_DIR):
        os.makedirs(LOG_DIR)
    fh = logging.FileHandler(os.path.join(LOG_DIR, f"{filename if filename else name}.log"))
    fh.setLevel(logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    formatter = logging.Formatter(
       "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    fh.setFormatter(formatter)
    ch.setFormatter(formatter)
    # add the handlers to the logger
    logger.addHandler(fh)
    logger.addHandler(ch)
    return logger

def read_json_file(file_path: str, logger: Logger) -> dict:
    """
    Parameters:
        file_path (str): File path to json document in local file storage
        logger (Logger):
    Returns:
        dict: returns the data stored in the json file as a python dictionary
    """
    try:
        with open(file_path, 'r', encoding="utf-8") as file:
            return json.load(file)
    except FileNotFoundError:
        logger.error(f"File not found at path: {file_path}")
        return None
    except json.JSONDecodeError:
        logger.error(f"Invalid JSON format in file:  {file_path}")
        return None
    except OSError as e:
        logger.error(f"Unable to read json file: {file_path} - {e}")
        return None

def write_json_file(file_path: str, data: dict, logger: Logger) -> None:
    """
    Parameters:
        file_path (str): File path to json document in local file storage
        data (dict): json serializable data, replaces any existing file content
        logger (Logger):
    """
    try:
        parent = os.path.dirname(file_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)
            logger.info(f"Successful data write to json file: {file_path}")
    except OSError as e:
        logger.error(f"Unable to write data to json file: {file_path} - {e}")

def normalize_text(raw: str) -> str:
    """
    Lowercases text, removes every character that is not a letter, digit,
    underscore or whitespace, and trims the result.

    Parameters:
        raw (str): a raw word or query string

    Returns:
        str: the normalized string, empty if nothing could be kept
    """
    if not raw:
        return ""
    return re_non_word.sub("", raw.lower()).strip()

def tokenize_text(text: str) -> list[str]:
    """
    Split text on runs of whitespace and normalize each piece.
    Empty pieces are dropped; order and duplicates are kept.

    Parameters:
        text (str): Text content parsed from an html document

    Returns:
        list[str]: a list of tokens extracted from the text content string
    """
    if not text:
        return []
    tokens = (normalize_text(piece) for piece in whitespace_tokenizer.tokenize(text))
    return [token for token in tokens if token]
