"""
RSA keys.
"""

from typing import Any, Dict, Mapping

from cryptography.hazmat.primitives.asymmetric import rsa

from ..errors import JwkError
from ..utils import int_to_base64url
from .base import JWK

CRT_MEMBERS = ("p", "q", "dp", "dq", "qi")


class RSAKey(JWK):
    KTY = "RSA"
    THUMBPRINT_MEMBERS = ("e", "n")

    __slots__ = ()

    @property
    def is_private(self) -> bool:
        return isinstance(self._keypair, rsa.RSAPrivateKey)

    def _public_numbers(self) -> rsa.RSAPublicNumbers:
        if self.is_private:
            return self._keypair.public_key().public_numbers()
        return self._keypair.public_numbers()

    def public_members(self) -> Dict[str, str]:
        numbers = self._public_numbers()
        return {
            "n": int_to_base64url(numbers.n),
            "e": int_to_base64url(numbers.e),
        }

    def private_members(self) -> Dict[str, str]:
        if not self.is_private:
            return {}
        numbers = self._keypair.private_numbers()
        return {
            "d": int_to_base64url(numbers.d),
            "p": int_to_base64url(numbers.p),
            "q": int_to_base64url(numbers.q),
            "dp": int_to_base64url(numbers.dmp1),
            "dq": int_to_base64url(numbers.dmq1),
            "qi": int_to_base64url(numbers.iqmp),
        }

    @classmethod
    def load_keypair(cls, data: Mapping[str, Any]) -> Any:
        n = cls.int_member(data, "n")
        e = cls.int_member(data, "e")
        public_numbers = rsa.RSAPublicNumbers(e, n)

        if "d" not in data:
            return public_numbers.public_key()

        d = cls.int_member(data, "d")
        present = [member for member in CRT_MEMBERS if member in data]
        if len(present) == len(CRT_MEMBERS):
            p, q = cls.int_member(data, "p"), cls.int_member(data, "q")
            dmp1, dmq1 = cls.int_member(data, "dp"), cls.int_member(data, "dq")
            iqmp = cls.int_member(data, "qi")
        elif present:
            raise JwkError(
                "RSA private key must carry all of p, q, dp, dq, qi or none of them",
                details={"present": present},
            )
        else:
            p, q = rsa.rsa_recover_prime_factors(n, e, d)
            dmp1 = rsa.rsa_crt_dmp1(d, p)
            dmq1 = rsa.rsa_crt_dmq1(d, q)
            iqmp = rsa.rsa_crt_iqmp(p, q)

        return rsa.RSAPrivateNumbers(p, q, d, dmp1, dmq1, iqmp, public_numbers).private_key()
