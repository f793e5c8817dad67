# -*- coding: utf-8 -*-

import itertools as it, operator as op, functools as ft
import re

from . import Collector, Graph, Field, parse_keyed_file, fields_from_row, to_number, scale_threshold
from ..config import cpu_fields

import logging
log = logging.getLogger(__name__)


class CPU(Collector):

	'''Aggregate cpu time, interrupts/context switches
		and fork rate, all from the same /proc/stat table.'''

	order = ( 'system', 'user', 'nice', 'idle',
		'iowait', 'irq', 'softirq', 'steal', 'guest', 'guest_nice' )
	colours = dict(
		system='00CC00', user='0066B3', nice='FF8000', idle='FFCC00',
		iowait='330099', irq='990099', softirq='CCFF00', steal='FF0000',
		guest='808080', guest_nice='008F00' )
	info = dict(
		user='CPU time spent by normal programs and daemons',
		nice='CPU time spent by nice(1)d programs',
		system='CPU time spent by the kernel in system activities',
		idle='Idle CPU time',
		iowait='CPU time spent waiting for I/O operations to finish'
			' when there is nothing else to do.',
		irq='CPU time spent handling interrupts',
		softirq='CPU time spent handling "batched" interrupts',
		steal='The time that a virtual CPU had runnable tasks,'
			' but the virtual CPU itself was not running',
		guest='The time spent running a virtual CPU'
			' for guest operating systems under the control of the Linux kernel.',
		guest_nice='The time spent running a niced guest'
			' (virtual CPU for guest operating systems under the control of the Linux kernel)' )

	@staticmethod
	def core_count(table, _re_core=re.compile(r'^cpu\d+$')):
		return sum(1 for k in table if _re_core.search(k))

	def reconcile(self, row):
		'Returns OrderedDict of cpu times (percent-seconds) with guest time taken out of user/nice.'
		ticks = fields_from_row(cpu_fields, row)
		# guest time is already accounted in user/nice
		ticks['user'] -= ticks['guest']
		ticks['nice'] -= ticks['guest_nice']
		hz = self.conf.hz
		for k, v in ticks.items(): ticks[k] = v * 100 / hz
		return ticks

	def cpu_graph(self, table):
		cores = self.core_count(table)
		if not cores:
			log.warning('No per-core cpu lines found, assuming single core for graph limits')
			cores = 1
		limit = cores * 100
		values, fields = self.reconcile(table['cpu']), list()
		for name in self.order:
			th = self.conf.thresholds.resolve(name)
			fields.append(Field( name, name,
				value=values[name], info=self.info[name],
				type='DERIVE', draw='AREASTACK', min=0, max=limit,
				colour=self.colours[name],
				warning=scale_threshold(th.warning, limit),
				critical=scale_threshold(th.critical, limit) ))
		return Graph( 'cpu', 'CPU usage', 'system', '%', fields,
			info='This graph shows how CPU time is spent.',
			args='--base 1000 -r --lower-limit 0 --upper-limit {}'.format(limit),
			scale=False, order=self.order, period='second' )

	def interrupts_graph(self, table):
		return Graph( 'interrupts',
			'Interrupts and context switches', 'system',
			'interrupts & ctx switches / ${graph_period}', [
				Field( 'intr', 'interrupts', value=to_number(table['intr'][0]),
					info='Interrupts are events that alter sequence of instructions'
						' executed by a processor. They can come from either hardware'
						' (exceptions, NMI, IRQ) or software.',
					type='DERIVE', min=0 ),
				Field( 'ctx', 'context switches', value=to_number(table['ctxt'][0]),
					info='A context switch occurs when a multitasking operating system'
						' suspends the currently running process, and starts executing another.',
					type='DERIVE', min=0 ) ],
			info='This graph shows the number of interrupts and context switches'
				' on the system. These are typically high on a busy system.',
			args='--base 1000 -l 0' )

	def forks_graph(self, table):
		return Graph( 'forks', 'Fork rate', 'processes', 'forks / ${graph_period}', [
				Field( 'forks', 'forks', value=to_number(table['processes'][0]),
					info='The number of forks per second.',
					type='DERIVE', min=0, max=100000 ) ],
			info='This graph shows the number of forks (new processes started) per second.',
			args='--base 1000 -l 0' )

	def read(self):
		table = parse_keyed_file(self.conf.paths.stat)
		if not table:
			log.info('Empty stat table ({}), skipping cpu graphs'.format(self.conf.paths.stat))
			return list()
		graphs = list()
		if 'cpu' in table: graphs.append(self.cpu_graph(table))
		else: log.warning('No aggregate cpu line in {}'.format(self.conf.paths.stat))
		for keys, graph in [
				(['intr', 'ctxt'], self.interrupts_graph),
				(['processes'], self.forks_graph) ]:
			missing = list(k for k in keys if k not in table)
			if missing:
				log.warning( 'Missing counters in {}: {},'
					' skipping graph'.format(self.conf.paths.stat, ', '.join(missing)) )
				continue
			graphs.append(graph(table))
		return graphs


collector = CPU
