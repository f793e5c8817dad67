# -*- coding: utf-8 -*-

import itertools as it, operator as op, functools as ft

import logging
log = logging.getLogger(__name__)


def format_value(val):
	if isinstance(val, bool): return 'yes' if val else 'no'
	if isinstance(val, float) and val.is_integer(): val = int(val)
	return str(val)


class Sink(object):

	def __init__(self, conf):
		self.conf = conf

	def configure(self, *graphs):
		raise NotImplementedError( 'Sink.configure method should be overidden in sink'
			' subclasses to describe Graph objects (titles, fields, limits) to whatever destination.' )

	def dispatch(self, *graphs):
		raise NotImplementedError( 'Sink.dispatch method should be overidden in sink'
			' subclasses to dispatch values of Graph objects to whatever destination.' )
