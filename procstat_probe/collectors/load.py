# -*- coding: utf-8 -*-

import itertools as it, operator as op, functools as ft

from . import Collector, Graph, Field, parse_flat_file, fields_from_row, scale_threshold
from ..config import load_fields

import logging
log = logging.getLogger(__name__)


class LoadAverage(Collector):

	labels = dict(load1='1 minute', load='5 minute', load15='15 minute')

	def read(self):
		# Trailing "running/total 4321" scheduler fields are not numbers, hence the count
		values = fields_from_row(load_fields,
			parse_flat_file(self.conf.paths.loadavg, count=len(load_fields)) )
		fields = list()
		for name, value in values.items():
			th = self.conf.thresholds.resolve(name)
			fields.append(Field( name, self.labels[name], value=value,
				info='{} load average'.format(self.labels[name]), type='GAUGE', min=0,
				warning=scale_threshold(th.warning),
				critical=scale_threshold(th.critical) ))
		return [Graph( 'load', 'Load average', 'system', 'load', fields,
			info='The load average of the machine describes how many processes'
				' are in the run-queue (scheduled to run "immediately").',
			args='--base 1000 -l 0', scale=False, order=load_fields )]


collector = LoadAverage
