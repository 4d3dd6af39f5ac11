# coding: utf-8
from ._base import app, main
