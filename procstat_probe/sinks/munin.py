# -*- coding: utf-8 -*-

import itertools as it, operator as op, functools as ft
import sys

from . import Sink, format_value

import logging
log = logging.getLogger(__name__)


class Munin(Sink):

	'''Munin plugin protocol output, one "multigraph" section per graph.
		http://guide.munin-monitoring.org/en/latest/plugin/protocol-multigraph.html'''

	graph_attrs = [
		('title', 'graph_title'), ('order', 'graph_order'), ('args', 'graph_args'),
		('vlabel', 'graph_vlabel'), ('scale', 'graph_scale'), ('info', 'graph_info'),
		('category', 'graph_category'), ('period', 'graph_period') ]
	field_attrs = [ 'label', 'info', 'type', 'draw', 'min', 'max',
		'colour', 'graph', 'negative', 'warning', 'critical' ]

	def __init__(self, conf, stream=None):
		super(Munin, self).__init__(conf)
		self.stream = stream or sys.stdout

	def write(self, lines):
		self.stream.write(''.join('{}\n'.format(line) for line in lines))

	@staticmethod
	def graph_lines(graph):
		yield 'multigraph {}'.format(graph.name)
		for attr, key in Munin.graph_attrs:
			val = getattr(graph, attr)
			if val is None: continue
			if attr == 'order': val = ' '.join(val)
			yield '{} {}'.format(key, format_value(val))
		for field in graph.fields:
			for attr in Munin.field_attrs:
				val = getattr(field, attr)
				if val is None: continue
				yield '{}.{} {}'.format(field.name, attr, format_value(val))

	@staticmethod
	def value_lines(graph):
		yield 'multigraph {}'.format(graph.name)
		for field in graph.fields:
			val = 'U' if field.value is None else format_value(field.value)
			yield '{}.value {}'.format(field.name, val)

	def configure(self, *graphs):
		log.debug('Writing config for {} graph(s)'.format(len(graphs)))
		self.write(it.chain.from_iterable(map(self.graph_lines, graphs)))

	def dispatch(self, *graphs):
		log.debug('Writing values for {} graph(s)'.format(len(graphs)))
		self.write(it.chain.from_iterable(map(self.value_lines, graphs)))


sink = Munin
