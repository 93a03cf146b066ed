from __future__ import annotations

import dataclasses as dc
from typing import Iterable

import numpy as np

from molcat.enums import CatalogKind
from molcat.exceptions import FormatError
from molcat.database.datatypes.fixed_width.jpl_cologne import (
	FormatJplCologne,
	read_filter_values,
	upper_state_temperature,
)


@dc.dataclass
class TransitionDataHolder:
	# source information
	kind : CatalogKind
	
	# spectral line data
	frequency : np.ndarray # MHz
	frequency_error : np.ndarray # MHz
	intensity : np.ndarray # log10 integrated intensity (rint)
	energy : np.ndarray # cm^{-1}
	temperature : np.ndarray # K, upper state temperature
	gu : np.ndarray
	tag : np.ndarray
	qn : np.ndarray # quantum numbers, as written in the catalog
	
	@classmethod
	def from_lines(cls, lines : Iterable[str], kind : CatalogKind) -> TransitionDataHolder:
		freq, err, rint, energy, temp, gu, tag, qn = [], [], [], [], [], [], [], []
		for i, line in enumerate(lines):
			try:
				f, r, e = read_filter_values(line)
				record = FormatJplCologne.get_record_from_str(line)
			except ValueError as ex:
				raise FormatError(f'Cannot parse transition {i} "{line}": {ex}') from ex
			freq.append(f)
			err.append(np.nan if record.frequency_error is None else record.frequency_error)
			rint.append(r)
			energy.append(e)
			temp.append(upper_state_temperature(f, e, kind))
			gu.append(0 if record.gu is None else record.gu)
			tag.append(0 if record.tag is None else record.tag)
			qn.append(record.qn)
		
		return cls(
			kind,
			np.array(freq, dtype=float),
			np.array(err, dtype=float),
			np.array(rint, dtype=float),
			np.array(energy, dtype=float),
			np.array(temp, dtype=float),
			np.array(gu, dtype=int),
			np.array(tag, dtype=int),
			np.array(qn, dtype=str),
		)
	
	def __len__(self):
		return self.frequency.size
	
	def to_recarray(self) -> np.recarray:
		return np.rec.fromarrays(
			[self.frequency, self.frequency_error, self.intensity, self.energy, self.temperature, self.gu, self.tag, self.qn],
			names=['FREQ', 'FREQ_ERR', 'RINT', 'ENERGY', 'TEMP', 'GU', 'TAG', 'QN'],
		)
	
	def select_frequency(self, centre : float, width : float) -> TransitionDataHolder:
		"""
		Transitions within `width`/2 MHz (inclusive) of `centre` MHz
		"""
		mask = np.abs(self.frequency - centre) <= width * 0.5
		return dc.replace(
			self,
			**dict((f.name, getattr(self, f.name)[mask]) for f in dc.fields(self) if f.name != 'kind'),
		)
