"""Reverse DNS resolution for the remote address and connection columns."""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

import dns.exception
import dns.resolver

from config import DNS_TIMEOUT, DNS_WORKERS
from network.connection import IpAddress


class IpResolver:
    """
    Resolves addresses to hostnames in the background.

    `resolve()` never blocks the redraw tick: lookups run on the executor and the
    result lands in the cache for a later frame. Each address is looked up once
    per process; failures are remembered so they are not retried every frame.
    """

    def __init__(self, executor: ThreadPoolExecutor | None = None, enabled: bool = True) -> None:
        self.enabled = enabled
        self._owns_executor = executor is None and enabled
        self._executor = executor
        if self._owns_executor:
            self._executor = ThreadPoolExecutor(max_workers=DNS_WORKERS, thread_name_prefix="dns")
        self._resolver: dns.resolver.Resolver | None = None
        if enabled:
            self._resolver = dns.resolver.Resolver()
            self._resolver.timeout = DNS_TIMEOUT
            self._resolver.lifetime = DNS_TIMEOUT
        self._lock = threading.Lock()
        self._cache: dict[IpAddress, str] = {}
        self._pending: set[IpAddress] = set()
        self._failed: set[IpAddress] = set()

    @property
    def cache(self) -> dict[IpAddress, str]:
        """Copy of the ip -> hostname mapping resolved so far."""
        with self._lock:
            return dict(self._cache)

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def resolve(self, ips: Iterable[IpAddress]) -> None:
        """Schedule lookups for addresses not cached, failed or already in flight."""
        if not self.enabled or self._executor is None or self._resolver is None:
            return
        with self._lock:
            todo = [
                ip for ip in set(ips)
                if ip not in self._cache and ip not in self._pending and ip not in self._failed
            ]
            self._pending.update(todo)
        for ip in todo:
            self._executor.submit(self._lookup, ip)

    def _lookup(self, ip: IpAddress) -> None:
        try:
            answer = self._resolver.resolve_address(str(ip))
            hostname = str(answer[0]).rstrip(".")
        except (dns.exception.DNSException, OSError) as exc:
            logging.debug(f"Reverse lookup failed for {ip}: {exc}")
            with self._lock:
                self._failed.add(ip)
        except Exception as exc:
            logging.warning(f"Unexpected reverse lookup error for {ip}: {exc}", exc_info=True)
            with self._lock:
                self._failed.add(ip)
        else:
            with self._lock:
                self._cache[ip] = hostname
        finally:
            with self._lock:
                self._pending.discard(ip)

    def shutdown(self) -> None:
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            logging.info("DNS resolver executor shut down")
