"""Shared fixtures: the classic TeX US English patterns."""

import os

import pytest

from hyph import Hyphenator
from patfile import read_pattern_file
from pattern_store import PatternStore

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def data_path(name):
    return os.path.join(DATA_DIR, name)


@pytest.fixture(scope='session')
def en_source():
    return read_pattern_file(data_path('patterns-en'))


@pytest.fixture(scope='session')
def en_store(en_source):
    store = PatternStore()
    store.load_patterns('en', en_source.patterns, en_source.exceptions)
    return store


@pytest.fixture(scope='session')
def en(en_store):
    return Hyphenator(en_store)


@pytest.fixture
def make_hyphenator():
    def make(patterns, exceptions=(), language='xx'):
        store = PatternStore()
        store.load_patterns(language, patterns, exceptions)
        return Hyphenator(store)
    return make
