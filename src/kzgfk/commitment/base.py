from abc import ABC, abstractmethod


class VectorCommitmentScheme(ABC):

    def __init__(self):
        self.order = None

    @abstractmethod
    def commit(self, vector):
        raise NotImplementedError()

    @abstractmethod
    def open(self, vector, index):
        raise NotImplementedError()

    @abstractmethod
    def verify(self, index, element, commitment, proof):
        raise NotImplementedError()

    @abstractmethod
    def update(self, commitment, index, old_element, new_element):
        raise NotImplementedError()

    @abstractmethod
    def update_open_i(self, proof, index, old_element, new_element, open_index=None):
        raise NotImplementedError()
