# -*- coding: utf-8 -*-

import itertools as it, operator as op, functools as ft

from . import Sink, format_value

import logging
log = logging.getLogger(__name__)


class Dumper(Sink):

	'Just dumps the data to log. Useful for debugging.'

	def configure(self, *graphs):
		log.info('--- dump of {} graph(s) config'.format(len(graphs)))
		for graph in graphs:
			log.info('Graph: {} ({!r}, category: {})'.format(graph.name, graph.title, graph.category))
			for field in graph.fields:
				log.info('Field: {}.{} {} min={} max={} warning={} critical={}'.format(
					graph.name, field.name, field.type, field.min,
					field.max, field.warning, field.critical ))
		log.info('--- dump end')

	def dispatch(self, *graphs):
		log.info('--- dump of {} graph(s)'.format(len(graphs)))
		for graph in graphs:
			for field in graph.fields:
				log.info('Value: {}.{} {}'.format(graph.name, field.name, format_value(field.value)))
		log.info('--- dump end')


sink = Dumper
