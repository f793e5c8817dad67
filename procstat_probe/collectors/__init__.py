# -*- coding: utf-8 -*-

import itertools as it, operator as op, functools as ft
from collections import namedtuple, OrderedDict
from io import open
import re

import logging
log = logging.getLogger(__name__)


class ParseError(ValueError): pass


def to_number( token,
		_re_int=re.compile(r'^[-+]?\d+$'),
		_re_float=re.compile(r'^[-+]?(\d+\.\d*|\.\d+)$') ):
	'Plain decimal int/float from token, no nan/inf/exponents. Numbers are returned as-is.'
	if isinstance(token, (int, float)): return token
	token = token.strip()
	if _re_int.search(token): return int(token)
	if _re_float.search(token): return float(token)
	raise ParseError('Non-numeric token: {!r}'.format(token))


def parse_keyed_file(path):
	'''Parse "key val1 val2 ..." lines into {key: [val1, val2, ...]}.
		Later duplicate keys replace earlier ones, lines without values are skipped.'''
	with open(path, encoding='utf-8') as src: data = src.read()
	table = dict()
	for line in data.splitlines():
		line = line.split()
		if not line: continue
		if len(line) < 2:
			log.debug('Skipping line without values in {}: {!r}'.format(path, line[0]))
			continue
		table[line[0]] = line[1:]
	return table


def parse_flat_file(path, count=None):
	'Parse first line of whitespace-separated numbers, limited to "count" leading ones.'
	with open(path, encoding='utf-8') as src: line = src.readline()
	tokens = line.split()
	if count is not None:
		if len(tokens) < count:
			raise ParseError( 'Expected at least {} values'
				' in {}, got {}: {!r}'.format(count, path, len(tokens), line) )
		tokens = tokens[:count]
	if not tokens: raise ParseError('No values in {}'.format(path))
	return list(map(to_number, tokens))


def fields_from_row(names, row, default=0):
	'Map positional row values to names, padding missing trailing ones with default.'
	row = list(map(to_number, row[:len(names)]))
	row.extend(it.repeat(default, len(names) - len(row)))
	return OrderedDict(zip(names, row))


def scale_threshold(raw, limit=None):
	'''Resolve configured threshold to a number.
		"N%" means percentage of limit, or just N if there is no dynamic limit.'''
	if raw is None: return None
	raw = str(raw).strip()
	if raw.endswith('%'):
		val = to_number(raw[:-1])
		return val * limit / 100 if limit else val
	return to_number(raw)


class Field(namedtuple('Field', 'name label value info type draw'
		' min max colour graph negative warning critical')):
	__slots__ = ()

	def __new__( cls, name, label, value=None, info=None,
			type='GAUGE', draw=None, min=None, max=None, colour=None,
			graph=None, negative=None, warning=None, critical=None ):
		return super(Field, cls).__new__( cls, name, label, value, info,
			type, draw, min, max, colour, graph, negative, warning, critical )


class Graph(namedtuple('Graph', 'name title category vlabel'
		' info args scale order period fields')):
	__slots__ = ()

	def __new__( cls, name, title, category, vlabel, fields,
			info=None, args=None, scale=None, order=None, period=None ):
		return super(Graph, cls).__new__( cls, name, title, category,
			vlabel, info, args, scale, order and tuple(order), period, tuple(fields) )

	def field(self, name):
		for field in self.fields:
			if field.name == name: return field
		raise KeyError(name)

	@property
	def values(self):
		return OrderedDict((field.name, field.value) for field in self.fields)


class Collector(object):

	def __init__(self, conf):
		self.conf = conf

	def read(self):
		raise NotImplementedError( 'Collector.read method should be'
			' overidden in collector subclasses to return list of Graph objects.' )
		# return [Graph(...), Graph(...), ...]
